"""
Data models for the customer support agent.
"""

from typing import Literal

from pydantic import BaseModel, Field

Role = Literal["system", "user", "assistant"]
Sentiment = Literal["positive", "neutral", "negative"]


class ChatMessage(BaseModel):
    role: Role
    content: str


class ChatContext(BaseModel):
    user_id: str | None = None
    user_plan: str | None = None
    previous_messages: list[ChatMessage] = Field(default_factory=list)


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    context: ChatContext | None = None


class ChatResponse(BaseModel):
    message: str
    suggestions: list[str] = Field(default_factory=list)
    requires_human_support: bool = False


class SentimentRequest(BaseModel):
    message: str


class SentimentResponse(BaseModel):
    sentiment: Sentiment
