"""Test endpoints for validating bot flow."""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_conversation_engine
from app.schemas.test_message import TestMessageRequest, TestMessageResponse
from app.services.conversation_engine import ConversationEngine

router = APIRouter()


@router.post("/test-message", response_model=TestMessageResponse)
async def test_message(
    payload: TestMessageRequest,
    engine: ConversationEngine = Depends(get_conversation_engine),
) -> TestMessageResponse:
    """Runs the conversation engine and returns its replies without sending them."""
    replies = await engine.handle_incoming_text(payload.chat_id, payload.text)
    return TestMessageResponse(chat_id=payload.chat_id, replies=replies)
