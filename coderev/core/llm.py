"""LLM client using Gemini's OpenAI-compatible endpoint."""

from langchain_openai import ChatOpenAI

from coderev.config import Settings, settings
from coderev.core.exceptions import ReviewFailedError
from coderev.core.logging import get_logger

logger = get_logger("llm")


def get_chat_llm(
    config: Settings = settings,
    temperature: float = 0.0,
) -> ChatOpenAI:
    """Build a chat LLM instance for reviews.

    Retries are disabled: a failed model call is terminal for the request.
    """
    api_key = config.gemini_api_key
    if not api_key:
        raise ValueError("GEMINI_API_KEY not configured")

    logger.info(f"[LLM] Using {config.review_model} at {config.llm_base_url}")

    return ChatOpenAI(
        model=config.review_model,
        api_key=api_key,
        base_url=config.llm_base_url,
        temperature=temperature,
        max_retries=0,
    )


def get_review_llm() -> ChatOpenAI:
    """FastAPI dependency providing the review model client."""
    try:
        return get_chat_llm()
    except ValueError as e:
        raise ReviewFailedError(str(e)) from e
