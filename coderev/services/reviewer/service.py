"""Reviewer service - orchestration layer."""

from contextlib import ExitStack

from langchain_core.language_models import BaseChatModel

from coderev.config import settings
from coderev.core.exceptions import CloneError, ReviewFailedError
from coderev.core.logging import get_logger
from coderev.core.prompts import PROMPT_VERSION
from coderev.services.reviewer.context import resolve_context
from coderev.services.reviewer.prompt import build_review_messages
from coderev.services.reviewer.requester import request_review
from coderev.services.reviewer.schemas import ReviewRequest, ReviewResult

logger = get_logger("reviewer.service")


async def review_code(request: ReviewRequest, llm: BaseChatModel) -> ReviewResult:
    """Gather context, ask the model for a review and return the result.

    Any failure is converted to ReviewFailedError while the workspace is still
    open; the workspace is removed afterwards on every path.
    """
    logger.info(f"Starting review: mode={request.type!r}, prompt v{PROMPT_VERSION}")

    with ExitStack() as workspaces:
        try:
            context = await resolve_context(request, workspaces)
            messages = build_review_messages(context)
            result = await request_review(llm, messages, timeout=settings.llm_timeout_seconds)
        except CloneError as e:
            logger.error(f"Clone error: {e}")
            raise ReviewFailedError(f"Failed to clone repository: {e}") from e
        except Exception as e:
            logger.exception(f"AI Review failed: {e}")
            raise ReviewFailedError(str(e) or "Internal Server Error") from e

    logger.info(f"Review completed: {len(result.issues)} issues")
    return result
