"""
Emotional Support Chat Endpoints.

Each message the user sends is stored together with a scripted reply chosen
by keyword, so the conversation can be shown again later.
"""

from typing import List

from fastapi import APIRouter, Query, status

from mylife_companion.core.database.entities.support_messages import SupportMessage
from mylife_companion.core.logging_config import get_logger
from mylife_companion.core.models.domain.enums import SenderType
from mylife_companion.core.models.io import (
    SupportExchange,
    SupportHistoryCleared,
    SupportMessageCreate,
    SupportMessageRead,
)
from mylife_companion.server.services.deps import CurrentUserDep, ReposDep
from mylife_companion.server.services.support_chat import reply_for

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/messages",
    response_model=SupportExchange,
    status_code=status.HTTP_201_CREATED,
    summary="Send Support Message",
    description="Store a message and the supportive reply to it.",
    responses={400: {"description": "Message is empty"}},
)
async def send_message(payload: SupportMessageCreate, user: CurrentUserDep, repos: ReposDep) -> SupportExchange:
    """
    Send a message to the support companion.

    - **message**: Free text; blank messages are rejected
    """
    user_message = SupportMessage(user_id=user.id, message=payload.message, sender_type=SenderType.user.value)
    reply = SupportMessage(user_id=user.id, message=reply_for(payload.message), sender_type=SenderType.ai.value)
    await repos.support_messages.add_exchange(user_message, reply)
    return SupportExchange(
        user_message=SupportMessageRead.model_validate(user_message),
        ai_message=SupportMessageRead.model_validate(reply),
    )


@router.get(
    "/messages",
    response_model=List[SupportMessageRead],
    summary="Get Support History",
    description="The most recent messages of the conversation, oldest first.",
)
async def get_history(
    user: CurrentUserDep,
    repos: ReposDep,
    limit: int = Query(default=50, ge=1, le=500),
) -> List[SupportMessageRead]:
    messages = await repos.support_messages.history(user.id, limit)
    return [SupportMessageRead.model_validate(message) for message in messages]


@router.delete(
    "/messages",
    response_model=SupportHistoryCleared,
    summary="Clear Support History",
)
async def clear_history(user: CurrentUserDep, repos: ReposDep) -> SupportHistoryCleared:
    deleted = await repos.support_messages.clear(user.id)
    logger.info(f"Cleared {deleted} support messages for user {user.id}")
    return SupportHistoryCleared(message="Conversation history cleared", deleted=deleted)
