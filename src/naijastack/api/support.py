from fastapi import APIRouter, Depends

from naijastack.agents.support_agent import (
    ChatRequest,
    ChatResponse,
    SentimentRequest,
    SentimentResponse,
    SupportAgent,
)
from naijastack.api.dependencies import get_support_agent

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
async def support_chat(request: ChatRequest, agent: SupportAgent = Depends(get_support_agent)) -> ChatResponse:
    """Answer a customer support message."""
    return await agent.chat(request)


@router.post("/sentiment", response_model=SentimentResponse)
async def support_sentiment(
    request: SentimentRequest, agent: SupportAgent = Depends(get_support_agent)
) -> SentimentResponse:
    """Classify a message as positive, neutral or negative."""
    return SentimentResponse(sentiment=agent.analyze_sentiment(request.message))
