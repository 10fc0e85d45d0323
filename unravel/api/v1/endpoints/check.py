from fastapi import APIRouter

from unravel.dependencies import CheckerDep
from unravel.models.schemas import CheckRequest, CheckResult, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=CheckResult,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Check plaintext",
    description="Ask the combined checker whether the text looks like plaintext.",
)
async def check_text(request: CheckRequest, checker: CheckerDep) -> CheckResult:
    return checker.check(request.text)
