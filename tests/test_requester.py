"""Tests for the review model call and response validation."""

import json

import pytest
from langchain_core.messages import HumanMessage, SystemMessage

from conftest import FakeChatModel, make_issue, make_review
from coderev.core.exceptions import (
    EmptyResponseError,
    ResponseParseError,
    ResponseValidationError,
    ReviewTimeoutError,
)
from coderev.services.reviewer.prompt import build_review_messages
from coderev.services.reviewer.requester import (
    RESPONSE_FORMAT,
    parse_review_content,
    request_review,
)
from coderev.services.reviewer.schemas import REVIEW_RESULT_SCHEMA


class TestParseReviewContent:
    """Tests for parse_review_content."""

    def test_valid(self):
        content = json.dumps(make_review(issues=[make_issue(file="a.py", line=3)]))

        result = parse_review_content(content)

        assert result.summary == "Small, readable change."
        assert result.scoring.total == 94
        assert result.issues[0].line == 3

    def test_not_json(self):
        with pytest.raises(ResponseParseError):
            parse_review_content("Sure! Here is my review:")

    def test_score_out_of_range(self):
        review = make_review()
        review["scoring"]["security"] = 45

        with pytest.raises(ResponseValidationError):
            parse_review_content(json.dumps(review))

    def test_missing_issue_field(self):
        issue = make_issue()
        del issue["technical_explanation"]

        with pytest.raises(ResponseValidationError):
            parse_review_content(json.dumps(make_review(issues=[issue])))

    def test_unknown_issue_type(self):
        with pytest.raises(ResponseValidationError):
            parse_review_content(json.dumps(make_review(issues=[make_issue(type="opinion")])))


class TestRequestReview:
    """Tests for request_review."""

    @pytest.mark.asyncio()
    async def test_single_call_with_schema(self, fake_llm):
        messages = build_review_messages("CODE SNIPPET:\nx = 1")

        result = await request_review(fake_llm, messages)

        assert result.scoring.security == 30
        assert len(fake_llm.calls) == 1
        call = fake_llm.calls[0]
        assert call["messages"] is messages
        assert call["kwargs"]["response_format"] == RESPONSE_FORMAT
        json_schema = call["kwargs"]["response_format"]["json_schema"]
        assert json_schema["strict"] is True
        assert json_schema["name"] == "review_result"
        assert json_schema["schema"] is REVIEW_RESULT_SCHEMA

    @pytest.mark.asyncio()
    async def test_empty_response(self):
        llm = FakeChatModel(content="")

        with pytest.raises(EmptyResponseError) as exc_info:
            await request_review(llm, build_review_messages(""))

        assert str(exc_info.value) == "No response from AI model"

    @pytest.mark.asyncio()
    async def test_content_parts_joined(self):
        body = json.dumps(make_review())
        llm = FakeChatModel(content=[{"type": "text", "text": body[:10]}, {"type": "text", "text": body[10:]}])

        result = await request_review(llm, build_review_messages(""))

        assert result.issues == []

    @pytest.mark.asyncio()
    async def test_empty_content_parts(self):
        """Content parts that carry no text count as no response."""
        llm = FakeChatModel(content=[{"type": "text", "text": ""}])

        with pytest.raises(EmptyResponseError) as exc_info:
            await request_review(llm, build_review_messages(""))

        assert str(exc_info.value) == "No response from AI model"

    @pytest.mark.asyncio()
    async def test_provider_error_propagates(self):
        llm = FakeChatModel(error=ConnectionError("upstream down"))

        with pytest.raises(ConnectionError):
            await request_review(llm, build_review_messages(""))

    @pytest.mark.asyncio()
    async def test_timeout(self):
        llm = FakeChatModel(content=json.dumps(make_review()), delay=1)

        with pytest.raises(ReviewTimeoutError):
            await request_review(llm, build_review_messages(""), timeout=0.01)


class TestBuildReviewMessages:
    """Tests for prompt assembly."""

    def test_context_is_user_turn_verbatim(self):
        context = "CODE SNIPPET:\n  leading spaces and {braces}\n"

        system, user = build_review_messages(context)

        assert isinstance(system, SystemMessage)
        assert isinstance(user, HumanMessage)
        assert user.content == context

    def test_empty_context_still_sent(self):
        _, user = build_review_messages("")

        assert user.content == ""

    def test_rubric_anchors(self):
        system, _ = build_review_messages("")
        prompt = system.content

        assert prompt.startswith("You are CodeRev")
        assert "Total possible score is 100." in prompt
        assert "1. Bug Risk Score (0-30)" in prompt
        assert "2. Security Score (0-30)" in prompt
        assert "3. Code Quality Score (0-25)" in prompt
        assert "4. Maintainability Score (0-15)" in prompt
        assert '"technical_explanation"' in prompt
        assert "Respond with valid JSON matching the schema provided." in prompt
        assert "Never invent problems" in prompt

    def test_system_prompt_is_fixed(self):
        first, _ = build_review_messages("a")
        second, _ = build_review_messages("b")

        assert first.content == second.content
