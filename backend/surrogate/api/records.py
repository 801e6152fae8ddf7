"""API endpoints for agent records, user settings and data reset."""

import logging
from typing import List

from fastapi import APIRouter, Depends

from surrogate.api.dependencies import store_dependency
from surrogate.models.schemas import Email, PaymentTransaction, TextDocument, UserContext
from surrogate.services.store import SurrogateStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/documents", response_model=List[TextDocument])
async def list_documents(store: SurrogateStore = Depends(store_dependency)):
    return await store.get_documents()


@router.get("/emails", response_model=List[Email])
async def list_emails(store: SurrogateStore = Depends(store_dependency)):
    return await store.get_emails()


@router.get("/payments", response_model=List[PaymentTransaction])
async def list_payments(store: SurrogateStore = Depends(store_dependency)):
    return await store.get_payments()


@router.get("/settings", response_model=UserContext)
async def get_settings(store: SurrogateStore = Depends(store_dependency)):
    return await store.get_user_context()


@router.put("/settings", response_model=UserContext)
async def save_settings(context: UserContext, store: SurrogateStore = Depends(store_dependency)):
    logger.info(f"Saving user settings for {context.name}")
    return await store.save_user_context(context)


@router.delete("/data")
async def clear_all_data(store: SurrogateStore = Depends(store_dependency)):
    """Remove chats, settings and every agent record."""
    await store.clear_all_data()
    return {"status": "cleared"}
