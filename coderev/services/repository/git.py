"""Git command line wrapper - data layer.

Calls the git binary directly. Every failure is raised as CloneError with
git's own message so callers can pass it through to the client.
"""

import os
import re
import subprocess
from pathlib import Path
from typing import Iterable, Optional
from urllib.parse import urlsplit

from coderev.core.exceptions import CloneError, ReviewTimeoutError
from coderev.core.logging import get_logger

logger = get_logger("repository.git")

# Never block on a credential prompt for private or missing repositories.
_GIT_ENV = {**os.environ, "GIT_TERMINAL_PROMPT": "0"}

DEFAULT_URL_SCHEMES = ("https", "http", "ssh", "git")

# user@host:path, the scp-like form of an ssh URL
_SCP_LIKE_URL = re.compile(r"^[\w.+-]+@[\w.-]+:(?!//)")


def run_git(
    args: list[str],
    cwd: Optional[Path] = None,
    timeout: Optional[float] = None,
) -> str:
    """Run a git command and return its stdout."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            env=_GIT_ENV,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise ReviewTimeoutError(f"git {args[0]}", timeout) from e
    except OSError as e:
        raise CloneError(f"git could not be started: {e}") from e

    if result.returncode != 0:
        message = (result.stderr or result.stdout or "").strip()
        raise CloneError(message or f"git {' '.join(args)} failed")
    return result.stdout


def check_repository_url(url: str, allowed_schemes: Iterable[str] = DEFAULT_URL_SCHEMES) -> None:
    """Reject URLs that would make git read from the server itself.

    Local paths, file:// and transport helpers such as ext:: are refused
    unless their scheme is explicitly allowed.
    """
    allowed = {scheme.lower() for scheme in allowed_schemes}
    if _SCP_LIKE_URL.match(url):
        scheme = "ssh"
    else:
        scheme = urlsplit(url).scheme.lower()
    if scheme not in allowed:
        raise CloneError(
            f"Unsupported repository URL: {url!r} "
            f"(allowed schemes: {', '.join(sorted(allowed))})"
        )


def clone_repository(
    url: str,
    destination: Path,
    depth: int = 1,
    timeout: Optional[float] = None,
    allowed_schemes: Iterable[str] = DEFAULT_URL_SCHEMES,
) -> None:
    """Shallow clone a repository into an existing empty directory."""
    check_repository_url(url, allowed_schemes)
    logger.info(f"Cloning {url} to {destination} (depth={depth})")
    run_git(
        ["clone", "--depth", str(depth), "--", url, str(destination)],
        timeout=timeout,
    )


def latest_commit_hash(repo: Path) -> Optional[str]:
    """Hash of the most recent commit, or None when git reports none."""
    commit = run_git(["log", "-1", "--format=%H"], cwd=repo).strip()
    return commit or None


def show_commit(repo: Path, ref: str = "HEAD") -> str:
    """Commit header and patch for ``ref``.

    For a root commit (every commit of a depth-1 clone) git shows the full
    content of the commit as additions.
    """
    return run_git(["show", "--no-color", ref], cwd=repo)
