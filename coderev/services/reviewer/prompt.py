"""Prompt assembly for a review request."""

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from coderev.core.prompts import render_review_system_prompt
from coderev.services.reviewer.schemas import SCORE_LIMITS

REVIEW_SYSTEM_PROMPT = render_review_system_prompt(SCORE_LIMITS)


def build_review_messages(context: str) -> list[BaseMessage]:
    """Pair the fixed reviewer instructions with the gathered context."""
    return [
        SystemMessage(content=REVIEW_SYSTEM_PROMPT),
        HumanMessage(content=context),
    ]
