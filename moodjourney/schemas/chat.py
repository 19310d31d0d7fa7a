"""
Pydantic schemas for the emotional support chat.
"""
from pydantic import BaseModel, Field
from typing import Optional


class ChatRequest(BaseModel):
    """Schema for a chat message. An empty message is rejected by the service."""
    message: Optional[str] = Field(None, max_length=4000)
    mood: Optional[str] = None
    context: Optional[str] = Field(None, max_length=4000)


class ChatResponse(BaseModel):
    reply: str
