"""Chat proxy endpoint for the API."""

from fastapi import APIRouter, Depends, Request

from components.chat.client import ChatCompletionClient
from components.chat.schemas import ChatReply, ChatRequest
from components.user.schemas import TokenClaims
from restapi.endpoints.auth import get_current_claims

router = APIRouter(
    prefix="/api",
    tags=["chat"],
)


def get_chat_client(request: Request) -> ChatCompletionClient:
    return request.app.state.chat_client


@router.post("/chat", response_model=ChatReply)
async def chat(
    chat_in: ChatRequest,
    claims: TokenClaims = Depends(get_current_claims),
    client: ChatCompletionClient = Depends(get_chat_client),
) -> ChatReply:
    """Forward the conversation to the AI provider and return its reply."""
    messages = [message.model_dump() for message in chat_in.messages]
    reply = await client.complete(messages)
    return ChatReply(reply=reply)
