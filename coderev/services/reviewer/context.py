"""Context gathering: turn a review request into the text the model reviews."""

import asyncio
from contextlib import ExitStack

from coderev.config import settings
from coderev.core.logging import get_logger
from coderev.services.repository import (
    clone_repository,
    latest_commit_hash,
    show_commit,
    temporary_workspace,
)
from coderev.services.reviewer.schemas import PASTE_MODE, URL_MODE, ReviewRequest

logger = get_logger("reviewer.context")

TRUNCATION_MARKER = "\n... (Content truncated)"
SNIPPET_HEADER = "CODE SNIPPET:\n"
REPOSITORY_TEMPLATE = (
    "You are reviewing a public GitHub repository ({url}).\n"
    "Focus on the changes in the LATEST COMMIT:\n\n"
    "GIT DIFF (Latest Commit):\n{diff}"
)


def truncate_context(context: str, limit: int | None = None) -> str:
    """Cut the context to ``limit`` characters and mark the cut."""
    limit = settings.max_context_chars if limit is None else limit
    if len(context) <= limit:
        return context
    logger.warning(f"Context truncated from {len(context)} to {limit} characters")
    return context[:limit] + TRUNCATION_MARKER


async def gather_repository_context(url: str, workspaces: ExitStack) -> str:
    """Clone ``url`` and frame the diff of its latest commit.

    The workspace is registered on ``workspaces`` and lives until the caller
    closes the stack.
    """
    workspace = workspaces.enter_context(temporary_workspace(settings.workspace_prefix))

    await asyncio.to_thread(
        clone_repository,
        url,
        workspace,
        settings.clone_depth,
        settings.clone_timeout_seconds,
        settings.repository_url_schemes,
    )
    commit = await asyncio.to_thread(latest_commit_hash, workspace)
    diff = await asyncio.to_thread(show_commit, workspace, commit or "HEAD")

    logger.info(f"Read latest commit {commit or 'HEAD'} of {url} ({len(diff)} chars)")
    return REPOSITORY_TEMPLATE.format(url=url, diff=diff)


async def resolve_context(request: ReviewRequest, workspaces: ExitStack) -> str:
    """Build the bounded review context for a request.

    Unknown modes and missing fields give an empty context rather than an
    error; the model is then asked to review nothing.
    """
    if request.type == URL_MODE and request.repo_url:
        context = await gather_repository_context(request.repo_url, workspaces)
    elif request.type == PASTE_MODE and request.code is not None:
        context = SNIPPET_HEADER + request.code
    else:
        logger.warning(f"Nothing to review for mode={request.type!r}, using empty context")
        context = ""

    return truncate_context(context)
