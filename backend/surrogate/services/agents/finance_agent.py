"""
Financial Agent - stock and market analysis.

The model is asked to look up live market data and pass it as command
parameters. When it could not (no usable price), the agent degrades to a
simulated report instead of failing, and says so in the analysis text.
"""

import logging
import random
from typing import Optional

from surrogate.models.agent_schemas import AnalyzeStockParams
from surrogate.models.schemas import AgentResult, AgentType, FinancialReport, PayloadKind, Recommendation
from surrogate.services.agents.base_agent import BaseAgent
from surrogate.services.store import SurrogateStore
from surrogate.utils.normalizer import parse_number

logger = logging.getLogger(__name__)

SIMULATED_NOTE = " (Note: Simulated Data - Search failed to retrieve live price)"

# Percent-change band inside which the recommendation is HOLD
RECOMMENDATION_BAND = 1.0

# 52-week range estimate when the model found a price but no range
ESTIMATED_HIGH_FACTOR = 1.25
ESTIMATED_LOW_FACTOR = 0.75


def recommend(change_percent: float) -> Recommendation:
    """BUY above +1%, SELL below -1%, HOLD otherwise."""
    if change_percent > RECOMMENDATION_BAND:
        return Recommendation.BUY
    if change_percent < -RECOMMENDATION_BAND:
        return Recommendation.SELL
    return Recommendation.HOLD


def _parse_recommendation(value: Optional[str]) -> Optional[Recommendation]:
    if not value:
        return None
    try:
        return Recommendation(value.strip().upper())
    except ValueError:
        return None


class FinanceAgent(BaseAgent):
    """Builds FinancialReport payloads. Never fails once a symbol is given."""

    agent_type = AgentType.FINANCE

    COMMANDS = {
        "analyze_stock": (AnalyzeStockParams, "analyze_stock"),
    }
    INVALID_MESSAGES = {
        "analyze_stock": "Missing stock symbol (e.g., AAPL, BTC).",
    }
    UNKNOWN_COMMAND_MESSAGE = "Unknown finance action."

    def __init__(self, store: SurrogateStore, rng: Optional[random.Random] = None):
        super().__init__(store)
        self.rng = rng or random.Random()

    async def analyze_stock(self, params: AnalyzeStockParams) -> AgentResult:
        price = parse_number(params.price)

        if price > 0:
            report = self._report_from_market_data(params, price)
        else:
            logger.info(f"No usable price for {params.symbol}, simulating report")
            report = self._simulated_report(params.symbol)
            report.analysis += SIMULATED_NOTE

        return AgentResult.ok(
            message=f"I've analyzed the latest market data for {report.symbol}.",
            data=report.to_wire(),
            payload_kind=PayloadKind.FINANCE_REPORT,
        )

    def _report_from_market_data(self, params: AnalyzeStockParams, price: float) -> FinancialReport:
        week52_high = parse_number(params.week52_high)
        week52_low = parse_number(params.week52_low)
        if week52_high == 0 or week52_low == 0:
            week52_high = price * ESTIMATED_HIGH_FACTOR
            week52_low = price * ESTIMATED_LOW_FACTOR

        change = parse_number(params.change)
        change_percent = parse_number(params.change_percent)
        if change_percent == 0 and change != 0:
            change_percent = round(change / price * 100, 2)

        recommendation = _parse_recommendation(params.recommendation) or recommend(change_percent)

        return FinancialReport(
            symbol=params.symbol.upper(),
            price=price,
            currency=params.currency or "USD",
            change=change,
            change_percent=change_percent,
            market_cap=str(params.market_cap) if params.market_cap else "N/A",
            pe_ratio=parse_number(params.pe_ratio) if params.pe_ratio else None,
            week52_high=week52_high,
            week52_low=week52_low,
            recommendation=recommendation,
            analysis=params.analysis or f"Real-time market data retrieved for {params.symbol}.",
        )

    def _simulated_report(self, symbol: str) -> FinancialReport:
        """Randomized but internally consistent report (change and percent share one delta)."""
        base_price = self.rng.random() * 1000 + 50
        change = self.rng.random() * 20 - 10
        change_percent = change / base_price * 100

        return FinancialReport(
            symbol=symbol.upper(),
            price=round(base_price, 2),
            currency="USD",
            change=round(change, 2),
            change_percent=round(change_percent, 2),
            market_cap=f"{self.rng.random() * 2 + 0.5:.1f}T",
            pe_ratio=round(self.rng.random() * 50 + 10, 2),
            week52_high=round(base_price * 1.2, 2),
            week52_low=round(base_price * 0.8, 2),
            recommendation=recommend(change_percent),
            analysis="Generated based on simulated market volatility and technical indicators.",
        )
