"""Single structured-output call to the review model."""

import asyncio
import json
from typing import Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage
from pydantic import ValidationError

from coderev.core.exceptions import (
    EmptyResponseError,
    ResponseParseError,
    ResponseValidationError,
    ReviewTimeoutError,
)
from coderev.core.logging import get_logger
from coderev.services.reviewer.schemas import REVIEW_RESULT_SCHEMA, ReviewResult

logger = get_logger("reviewer.requester")

RESPONSE_FORMAT = {
    "type": "json_schema",
    "json_schema": {
        "name": "review_result",
        "strict": True,
        "schema": REVIEW_RESULT_SCHEMA,
    },
}


def parse_review_content(content: str) -> ReviewResult:
    """Parse and validate the model's JSON output."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"AI model returned invalid JSON: {e}") from e

    try:
        return ReviewResult.model_validate(data)
    except ValidationError as e:
        raise ResponseValidationError(
            f"AI model response does not match the review schema: {e.error_count()} error(s)"
        ) from e


async def request_review(
    llm: BaseChatModel,
    messages: list[BaseMessage],
    timeout: Optional[float] = None,
) -> ReviewResult:
    """Send the review prompt once and return the validated result."""
    call = llm.ainvoke(messages, response_format=RESPONSE_FORMAT)
    if timeout is None:
        response = await call
    else:
        try:
            response = await asyncio.wait_for(call, timeout)
        except asyncio.TimeoutError as e:
            raise ReviewTimeoutError("AI model request", timeout) from e

    content = response.content
    if not isinstance(content, str):
        content = "".join(
            part.get("text", "") if isinstance(part, dict) else str(part) for part in content
        )
    if not content:
        raise EmptyResponseError()

    result = parse_review_content(content)
    logger.info(
        f"Review parsed: {len(result.issues)} issues, total score {result.scoring.total:g}"
    )
    return result
