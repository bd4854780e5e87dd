"""
Prompt templates and keyword tables for the customer support agent.
"""

SYSTEM_PROMPT = """You are a helpful customer support agent for {app_name}, a Nigerian SaaS platform.

Your role:
- Help users with technical questions about the platform
- Guide them through payment issues (Paystack)
- Explain features and pricing
- Use Nigerian English when appropriate
- Be friendly, professional, and concise

Context about {app_name}:
- Integrated with Paystack for Naira payments
- AI-powered features
- Plans: Basic (₦5,000/mo), Pro (₦15,000/mo), Enterprise (₦50,000/mo)

If you cannot answer a question or it requires account-specific actions, suggest contacting human support at {support_email}."""

EMAIL_SYSTEM_PROMPT = (
    "You are drafting professional email responses for customer support. Be helpful, concise, and professional."
)

FALLBACK_MESSAGE = (
    "I apologize, but I encountered an error. Please contact our support team at {support_email} for assistance."
)

HUMAN_SUPPORT_KEYWORDS = (
    "contact support",
    "speak to human",
    "talk to agent",
    "refund",
    "account locked",
    "payment failed",
)

# Checked in order; the first group with a matching keyword wins
SUGGESTION_GROUPS: tuple[tuple[tuple[str, ...], list[str]], ...] = (
    (
        ("payment", "paystack"),
        [
            "How do I verify a payment?",
            "What payment methods do you accept?",
            "How long do payments take to process?",
        ],
    ),
    (
        ("plan", "upgrade"),
        [
            "What are the differences between plans?",
            "Can I downgrade my plan?",
            "How do I cancel my subscription?",
        ],
    ),
    (
        ("api", "integration"),
        [
            "How do I get my API key?",
            "What are the API rate limits?",
            "Where is the API documentation?",
        ],
    ),
)

DEFAULT_SUGGESTIONS = [
    "How do I get started?",
    "What features are included?",
    "How much does it cost?",
]

NEGATIVE_KEYWORDS = ("angry", "frustrated", "terrible", "broken", "useless")
POSITIVE_KEYWORDS = ("great", "excellent", "love", "amazing", "perfect")


def get_system_prompt(app_name: str, support_email: str, user_plan: str | None = None) -> str:
    prompt = SYSTEM_PROMPT.format(app_name=app_name, support_email=support_email)
    if user_plan:
        prompt += f"\n\nUser's current plan: {user_plan}"
    return prompt


def create_email_prompt(subject: str, body: str) -> str:
    return f"Generate an email response for this support ticket:\n\nSubject: {subject}\n\nBody: {body}"
