"""Repository access: git commands and temporary workspaces."""

from coderev.services.repository.git import (
    check_repository_url,
    clone_repository,
    latest_commit_hash,
    run_git,
    show_commit,
)
from coderev.services.repository.workspace import (
    create_workspace,
    remove_workspace,
    temporary_workspace,
)

__all__ = [
    "check_repository_url",
    "clone_repository",
    "latest_commit_hash",
    "run_git",
    "show_commit",
    "create_workspace",
    "remove_workspace",
    "temporary_workspace",
]
