#!/usr/bin/env python3
"""Run a review locally for a file or a public repository URL.

Usage:
    python scripts/run_review.py path/to/file.py
    python scripts/run_review.py https://github.com/owner/repo
"""
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from coderev.core.exceptions import ApiException
from coderev.core.llm import get_chat_llm
from coderev.services.reviewer.schemas import (
    PASTE_MODE,
    SCORE_LIMITS,
    URL_MODE,
    ReviewRequest,
    score_band,
    sort_issues_by_severity,
)
from coderev.services.reviewer.service import review_code


def build_request(target: str) -> ReviewRequest:
    if "://" in target or target.startswith("git@"):
        return ReviewRequest(type=URL_MODE, repo_url=target)
    return ReviewRequest(type=PASTE_MODE, code=Path(target).read_text())


async def main(target: str) -> int:
    try:
        result = await review_code(build_request(target), get_chat_llm())
    except ApiException as e:
        print(f"Review failed: {e.message}", file=sys.stderr)
        return 1

    print(result.summary)
    print()
    for name, limit in SCORE_LIMITS.items():
        score = getattr(result.scoring, name)
        print(f"{name:<16} {score:g}/{limit}  {score_band(score, limit)}")
    print(f"{'total':<16} {result.scoring.total:g}/{sum(SCORE_LIMITS.values())}")
    print()
    for issue in sort_issues_by_severity(result.issues):
        location = f" ({issue.file}:{issue.line})" if issue.file and issue.line else ""
        print(f"[{issue.severity}] {issue.type}: {issue.title}{location}")
        print(f"    {issue.explanation}")
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    sys.exit(asyncio.run(main(sys.argv[1])))
