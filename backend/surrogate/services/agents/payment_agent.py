"""
Payment Agent - simulated payments.

No money moves: the transaction is recorded with status "Success" as a
confirmation the user can review.
"""

from datetime import datetime, timezone

from surrogate.models.agent_schemas import MakePaymentParams
from surrogate.models.schemas import AgentResult, AgentType, PayloadKind, PaymentStatus, PaymentTransaction
from surrogate.services.agents.base_agent import BaseAgent
from surrogate.services.store import new_record_id


class PaymentAgent(BaseAgent):
    agent_type = AgentType.PAYMENT

    COMMANDS = {
        "make_payment": (MakePaymentParams, "make_payment"),
    }
    INVALID_MESSAGES = {
        "make_payment": "Missing amount or recipient for payment.",
    }
    UNKNOWN_COMMAND_MESSAGE = "Unknown payment action."

    async def make_payment(self, params: MakePaymentParams) -> AgentResult:
        transaction = PaymentTransaction(
            id=new_record_id(),
            amount=params.amount,
            currency=params.currency,
            recipient=params.recipient,
            description=params.description,
            status=PaymentStatus.SUCCESS,
            timestamp=datetime.now(timezone.utc),
        )
        await self.store.add_payment(transaction)

        return AgentResult.ok(
            message=(
                "✅ Payment Processed\n"
                f"Sent ${transaction.amount:.2f} {transaction.currency} to {transaction.recipient}\n"
                f"Ref: {transaction.id[-6:]}"
            ),
            data=transaction.to_wire(),
            payload_kind=PayloadKind.PAYMENT,
        )
