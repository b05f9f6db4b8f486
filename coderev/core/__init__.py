"""Shared library utilities."""

from coderev.core.llm import get_chat_llm, get_review_llm
from coderev.core.logging import get_logger

__all__ = [
    "get_chat_llm",
    "get_review_llm",
    "get_logger",
]
