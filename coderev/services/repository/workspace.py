"""Temporary workspaces for repository checkouts."""

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from coderev.core.logging import get_logger

logger = get_logger("repository.workspace")


def create_workspace(prefix: str) -> Path:
    """Create a uniquely named directory under the system temp root."""
    path = Path(tempfile.mkdtemp(prefix=prefix))
    logger.debug(f"Created workspace {path}")
    return path


def remove_workspace(path: Path) -> None:
    """Delete a workspace recursively.

    A missing directory is fine. Other failures are logged and swallowed so
    they never replace the outcome of the request that owned the workspace.
    """
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        return
    except OSError as e:
        logger.error(f"Failed to clean up temp directory {path}: {e}")
        return
    logger.debug(f"Removed workspace {path}")


@contextmanager
def temporary_workspace(prefix: str) -> Iterator[Path]:
    """Scoped workspace that is removed on every exit path."""
    path = create_workspace(prefix)
    try:
        yield path
    finally:
        remove_workspace(path)
