"""Pydantic schemas for reviewer service."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

PASTE_MODE = "paste"
URL_MODE = "url"

IssueType = Literal["bug", "security", "style", "performance", "best_practice"]
Severity = Literal["low", "medium", "high", "critical"]

SCORE_LIMITS = {
    "bug_risk": 30,
    "security": 30,
    "code_quality": 25,
    "maintainability": 15,
}

# Dashboard ordering. best_practice ranks after every real severity.
SEVERITY_PRIORITY = {
    "critical": 0,
    "high": 1,
    "medium": 2,
    "low": 3,
    "best_practice": 4,
}
UNKNOWN_SEVERITY_PRIORITY = 99

# Structured output contract sent with every review request.
REVIEW_RESULT_SCHEMA = {
    "type": "object",
    "properties": {
        "summary": {"type": "string"},
        "scoring": {
            "type": "object",
            "properties": {
                "bug_risk": {
                    "type": "number",
                    "description": "Score 0-30 based on logical errors, null safety, edge cases",
                },
                "security": {
                    "type": "number",
                    "description": "Score 0-30 based on secrets, unsafe inputs, dangerous patterns",
                },
                "code_quality": {
                    "type": "number",
                    "description": "Score 0-25 based on readability, naming, modularity",
                },
                "maintainability": {
                    "type": "number",
                    "description": "Score 0-15 based on organization, size, separation of concerns",
                },
            },
            "required": ["bug_risk", "security", "code_quality", "maintainability"],
        },
        "issues": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id": {"type": "string"},
                    "type": {
                        "type": "string",
                        "enum": ["bug", "security", "style", "performance", "best_practice"],
                    },
                    "severity": {
                        "type": "string",
                        "enum": ["low", "medium", "high", "critical"],
                    },
                    "title": {"type": "string"},
                    "description": {"type": "string"},
                    "explanation": {
                        "type": "string",
                        "description": "A simple, beginner-friendly explanation of the issue",
                    },
                    "technical_explanation": {
                        "type": "string",
                        "description": "A detailed technical explanation for experienced developers",
                    },
                    "file": {"type": "string"},
                    "line": {"type": "integer"},
                    "code_snippet": {"type": "string"},
                },
                "required": [
                    "id",
                    "type",
                    "severity",
                    "title",
                    "description",
                    "explanation",
                    "technical_explanation",
                ],
            },
        },
    },
    "required": ["summary", "scoring", "issues"],
}


class ReviewRequest(BaseModel):
    """Inbound review request.

    ``type`` is kept as a free string: unknown modes resolve to an empty
    context instead of being rejected.
    """

    model_config = ConfigDict(populate_by_name=True)

    type: str = ""
    code: Optional[str] = None
    repo_url: Optional[str] = Field(default=None, alias="repoUrl")


class Scoring(BaseModel):
    """Rubric scores, each bounded by its ceiling."""

    bug_risk: float = Field(ge=0, le=SCORE_LIMITS["bug_risk"])
    security: float = Field(ge=0, le=SCORE_LIMITS["security"])
    code_quality: float = Field(ge=0, le=SCORE_LIMITS["code_quality"])
    maintainability: float = Field(ge=0, le=SCORE_LIMITS["maintainability"])

    @property
    def total(self) -> float:
        return self.bug_risk + self.security + self.code_quality + self.maintainability


class Issue(BaseModel):
    """A single review finding."""

    id: str
    type: IssueType
    severity: Severity
    title: str
    description: str
    explanation: str
    technical_explanation: str
    file: Optional[str] = None
    line: Optional[int] = None
    code_snippet: Optional[str] = None


class ReviewResult(BaseModel):
    """Result of a code review."""

    summary: str
    scoring: Scoring
    issues: list[Issue]


def sort_issues_by_severity(issues: list[Issue]) -> list[Issue]:
    """Order issues most severe first; unknown severities go last."""
    return sorted(
        issues,
        key=lambda issue: SEVERITY_PRIORITY.get(issue.severity, UNKNOWN_SEVERITY_PRIORITY),
    )


def score_band(score: float, max_score: float) -> str:
    """Beginner-friendly label for a score relative to its ceiling."""
    percentage = (score / max_score) * 100
    if percentage > 80:
        return "Great"
    if percentage < 30:
        return "High Risk"
    return "Needs Attention"
