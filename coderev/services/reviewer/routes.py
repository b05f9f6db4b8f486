"""Review routes."""

from fastapi import APIRouter, Depends
from langchain_core.language_models import BaseChatModel

from coderev.core.llm import get_review_llm
from coderev.services.reviewer.schemas import ReviewRequest, ReviewResult
from coderev.services.reviewer.service import review_code

router = APIRouter()


@router.post(
    "/review",
    response_model=ReviewResult,
    response_model_exclude_none=True,
)
async def review(
    request: ReviewRequest,
    llm: BaseChatModel = Depends(get_review_llm),
) -> ReviewResult:
    """Review a pasted snippet or the latest commit of a public repository."""
    return await review_code(request, llm)
