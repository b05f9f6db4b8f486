"""Shared fixtures: a fake chat model, real git repositories, sample reviews."""

import asyncio
import json
import subprocess
import tempfile

import pytest
from langchain_core.messages import AIMessage

from coderev.config import settings

SECRET_LINE = 'AWS_SECRET_ACCESS_KEY = "wJalrXUtnFEMI/K7MDENG/bPxRfiCYEXAMPLEKEY"'


class FakeChatModel:
    """Stands in for the chat model; records every call it receives."""

    def __init__(self, content="", error=None, delay=None):
        self.content = content
        self.error = error
        self.delay = delay
        self.calls = []

    async def ainvoke(self, messages, **kwargs):
        self.calls.append({"messages": messages, "kwargs": kwargs})
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return AIMessage(content=self.content)

    @property
    def last_context(self):
        return self.calls[-1]["messages"][-1].content


def make_review(**overrides) -> dict:
    review = {
        "summary": "Small, readable change.",
        "scoring": {
            "bug_risk": 28,
            "security": 30,
            "code_quality": 22,
            "maintainability": 14,
        },
        "issues": [],
    }
    review.update(overrides)
    return review


def make_issue(**overrides) -> dict:
    issue = {
        "id": "issue-1",
        "type": "bug",
        "severity": "medium",
        "title": "Possible None dereference",
        "description": "value may be None here",
        "explanation": "It is like opening an empty box and expecting a gift.",
        "technical_explanation": "Guard the Optional return before attribute access.",
    }
    issue.update(overrides)
    return issue


@pytest.fixture
def fake_llm():
    return FakeChatModel(content=json.dumps(make_review()))


@pytest.fixture
def temp_root(tmp_path, monkeypatch):
    """Redirect workspace creation so leftovers can be inspected."""
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


def _git(cwd, *args):
    subprocess.run(["git", *args], cwd=str(cwd), capture_output=True, check=True)


@pytest.fixture
def git_repo(tmp_path):
    """A repository with two commits; the latest one leaks a secret."""
    repo = tmp_path / "origin"
    repo.mkdir()
    _git(repo, "init")
    _git(repo, "config", "user.email", "test@test.com")
    _git(repo, "config", "user.name", "Test")

    (repo / "app.py").write_text("def greet(name):\n    return f'hello {name}'\n")
    _git(repo, "add", "app.py")
    _git(repo, "commit", "-m", "init")

    (repo / "settings.py").write_text(f"{SECRET_LINE}\n")
    _git(repo, "add", "settings.py")
    _git(repo, "commit", "-m", "add settings")
    return repo


@pytest.fixture
def repo_url(git_repo):
    # file:// so that --depth is honoured for a local clone
    return git_repo.as_uri()


@pytest.fixture(autouse=True)
def allow_local_clones(monkeypatch):
    """Tests clone from file:// repositories built in tmp_path."""
    monkeypatch.setattr(
        settings, "repository_url_schemes", [*settings.repository_url_schemes, "file"]
    )
