"""
Emotional support chat using the OpenAI Chat Completions API.

Stateless: each request sends the system prompt plus the single user
message. Upstream failures are reported, never retried.
"""
import logging
from typing import Optional
import httpx
from moodjourney.core.config import settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT_GUIDELINES = """Guidelines:
- Be warm, empathetic, and non-judgmental
- Provide emotional validation and support
- Offer practical coping strategies when appropriate
- Encourage professional help if the situation seems serious
- Keep responses conversational and supportive
- Avoid giving medical advice
- Focus on emotional support and understanding"""


class ChatServiceError(Exception):
    """Chat failure with the HTTP status to report to the client."""
    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def build_system_prompt(mood: Optional[str] = None, context: Optional[str] = None) -> str:
    """System prompt with optional mood and context lines."""
    mood_line = f"The user's current mood is: {mood}" if mood else ""
    context_line = f"Additional context: {context}" if context else ""
    return (
        "You are an empathetic emotional support AI assistant. Your role is to provide "
        "compassionate, understanding, and helpful responses to users who may be "
        "experiencing various emotional states.\n\n"
        f"{mood_line}\n"
        f"{context_line}\n\n"
        f"{SYSTEM_PROMPT_GUIDELINES}"
    )


def error_for_status(status_code: int) -> ChatServiceError:
    """Map an upstream error status to the error reported to the client."""
    if status_code == 429:
        return ChatServiceError("Rate limit exceeded. Please try again in a moment.", 429)
    if status_code == 401:
        return ChatServiceError("Invalid API key. Please check your OpenAI API key configuration.", 401)
    return ChatServiceError(f"OpenAI API error: {status_code}", 502)


async def generate_support_reply(
    message: Optional[str],
    mood: Optional[str] = None,
    context: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> str:
    """
    Ask the chat model for a supportive reply.

    Args:
        message: The user's message (required)
        mood: Current mood label, added to the system prompt when given
        context: Free-form extra context for the system prompt
        transport: Optional httpx transport (used by tests)

    Returns:
        The assistant reply text

    Raises:
        ChatServiceError: on missing input/configuration or upstream failure
    """
    if not message or not message.strip():
        raise ChatServiceError("Message is required", 400)

    openai_api_key = settings.OPENAI_API_KEY
    if not openai_api_key:
        logger.warning("OpenAI API key not configured. Cannot generate chat reply.")
        raise ChatServiceError("OpenAI API key not configured", 500)

    logger.info(f"Received chat request (mood={mood!r}, has_context={bool(context)})")

    payload = {
        "model": settings.OPENAI_CHAT_MODEL,
        "messages": [
            {"role": "system", "content": build_system_prompt(mood, context)},
            {"role": "user", "content": message}
        ],
        "temperature": 0.7,
        "max_tokens": 500
    }

    try:
        async with httpx.AsyncClient(timeout=settings.OPENAI_TIMEOUT_SECONDS, transport=transport) as client:
            response = await client.post(
                settings.OPENAI_API_URL,
                headers={
                    "Authorization": f"Bearer {openai_api_key}",
                    "Content-Type": "application/json"
                },
                json=payload
            )
    except httpx.TimeoutException:
        logger.error("OpenAI API request timed out.")
        raise ChatServiceError("OpenAI API request timed out", 502)
    except httpx.HTTPError as e:
        logger.error(f"OpenAI API request failed: {e}", exc_info=True)
        raise ChatServiceError("OpenAI API request failed", 502)

    if response.status_code != 200:
        logger.error(f"OpenAI API error {response.status_code}: {response.text}")
        raise error_for_status(response.status_code)

    try:
        reply = response.json()["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError):
        logger.error(f"Unexpected OpenAI response: {response.text}")
        raise ChatServiceError("OpenAI API returned an unexpected response", 502)

    logger.debug(f"Generated reply: {reply}")
    return reply
