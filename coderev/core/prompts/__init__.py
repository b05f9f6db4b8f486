"""Prompt templates using Jinja2."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

PROMPTS_DIR = Path(__file__).parent
PROMPT_VERSION = "1"

_env = Environment(
    loader=FileSystemLoader(PROMPTS_DIR),
    undefined=StrictUndefined,
    keep_trailing_newline=False,
)


def render_review_system_prompt(score_limits: dict[str, int]) -> str:
    """Render the reviewer persona, scoring rubric and output contract."""
    template = _env.get_template("review_system.jinja2")
    return template.render(
        limits=score_limits,
        total=sum(score_limits.values()),
    )
