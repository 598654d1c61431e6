"""Pydantic schemas for the chat proxy."""

from typing import List
from pydantic import BaseModel


class ChatMessage(BaseModel):
    """A single conversation turn."""
    role: str
    content: str


class ChatRequest(BaseModel):
    messages: List[ChatMessage]


class ChatReply(BaseModel):
    reply: str
