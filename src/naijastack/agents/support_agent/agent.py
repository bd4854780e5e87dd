"""
Customer support agent backed by a chat completion model.
"""

from typing import Any

import openai
import structlog
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from naijastack.agents.support_agent.models import ChatMessage, ChatRequest, ChatResponse, Sentiment
from naijastack.agents.support_agent.prompts import (
    DEFAULT_SUGGESTIONS,
    EMAIL_SYSTEM_PROMPT,
    FALLBACK_MESSAGE,
    HUMAN_SUPPORT_KEYWORDS,
    NEGATIVE_KEYWORDS,
    POSITIVE_KEYWORDS,
    SUGGESTION_GROUPS,
    create_email_prompt,
    get_system_prompt,
)
from naijastack.core.ai_providers import get_chat_model
from naijastack.core.config.app_config import AppConfig
from naijastack.core.config.provider_config import ProviderConfig
from naijastack.core.errors import CompletionAPIError

logger = structlog.get_logger(__name__)

_MESSAGE_TYPES: dict[str, type[BaseMessage]] = {
    "system": SystemMessage,
    "user": HumanMessage,
    "assistant": AIMessage,
}


def _to_langchain(message: ChatMessage) -> BaseMessage:
    return _MESSAGE_TYPES[message.role](content=message.content)


def _reply_text(reply: Any) -> str:
    content = getattr(reply, "content", reply)
    if isinstance(content, list):
        # Multi-part replies: keep the text parts only
        content = "".join(part.get("text", "") if isinstance(part, dict) else str(part) for part in content)
    return str(content)


class SupportAgent:
    """
    Customer support agent for payment, plan and integration questions.

    The chat model is created on first use so the service can start without
    completion credentials.

    Example:
        agent = SupportAgent(config.ai, config.app)
        response = await agent.chat(ChatRequest(message="How do I upgrade my plan?"))
    """

    def __init__(self, settings: ProviderConfig, app: AppConfig, llm: Any | None = None):
        self.settings = settings
        self.app = app
        self._llm = llm

    @property
    def llm(self) -> Any:
        if self._llm is None:
            self._llm = get_chat_model(self.settings)
        return self._llm

    async def chat(self, request: ChatRequest) -> ChatResponse:
        """Answer a user message, with escalation detection and follow-up suggestions."""
        context = request.context
        system_prompt = get_system_prompt(
            self.app.name, self.app.support_email, user_plan=context.user_plan if context else None
        )
        messages = [
            ChatMessage(role="system", content=system_prompt),
            *(context.previous_messages if context else []),
            ChatMessage(role="user", content=request.message),
        ]

        try:
            reply = await self.complete(messages)
        except CompletionAPIError as e:
            logger.error(
                "support_agent_completion_failed",
                status_code=e.status_code,
                error=e.message,
                user_id=context.user_id if context else None,
            )
            return ChatResponse(
                message=FALLBACK_MESSAGE.format(support_email=self.app.support_email),
                requires_human_support=True,
            )

        return ChatResponse(
            message=reply,
            suggestions=self.generate_suggestions(request.message),
            requires_human_support=self.detect_human_support_needed(reply),
        )

    async def quick_chat(self, message: str) -> str:
        """One-off question without conversation context; returns just the reply text."""
        response = await self.chat(ChatRequest(message=message))
        return response.message

    async def generate_email_response(self, ticket_subject: str, ticket_body: str) -> str:
        """Draft a reply to a support ticket. Completion errors propagate to the caller."""
        return await self.complete(
            [
                ChatMessage(role="system", content=EMAIL_SYSTEM_PROMPT),
                ChatMessage(role="user", content=create_email_prompt(ticket_subject, ticket_body)),
            ]
        )

    async def complete(self, messages: list[ChatMessage]) -> str:
        """
        Send a role-tagged message sequence to the completion model.

        Raises:
            CompletionAPIError: If the provider fails or returns an empty reply.
        """
        try:
            reply = await self.llm.ainvoke([_to_langchain(m) for m in messages])
        except openai.APIStatusError as e:
            raise CompletionAPIError(e.message, status_code=e.status_code) from e
        except openai.OpenAIError as e:
            raise CompletionAPIError(str(e)) from e

        text = _reply_text(reply).strip()
        if not text:
            raise CompletionAPIError("Completion provider returned an empty reply")
        return text

    @staticmethod
    def detect_human_support_needed(message: str) -> bool:
        """Whether a reply points the user to human support."""
        message_lower = message.lower()
        return any(keyword in message_lower for keyword in HUMAN_SUPPORT_KEYWORDS)

    @staticmethod
    def generate_suggestions(user_message: str) -> list[str]:
        """Follow-up questions based on what the user asked about."""
        message_lower = user_message.lower()
        for keywords, suggestions in SUGGESTION_GROUPS:
            if any(keyword in message_lower for keyword in keywords):
                return list(suggestions)
        return list(DEFAULT_SUGGESTIONS)

    @staticmethod
    def analyze_sentiment(message: str) -> Sentiment:
        """Keyword-count sentiment, used to prioritise urgent tickets."""
        message_lower = message.lower()
        negative_count = sum(1 for keyword in NEGATIVE_KEYWORDS if keyword in message_lower)
        positive_count = sum(1 for keyword in POSITIVE_KEYWORDS if keyword in message_lower)

        if negative_count > positive_count:
            return "negative"
        if positive_count > negative_count:
            return "positive"
        return "neutral"
