from fastapi import APIRouter

from unravel.core.config import Settings
from unravel.core.exceptions import CiphertextTooLongError
from unravel.dependencies import BatchDep, CheckerDep, RegistryDep, SettingsDep
from unravel.models.schemas import (
    DecodeOutcome,
    DecodeRequest,
    DecodeResponse,
    ErrorResponse,
    SearchRequest,
    SearchResponse,
)
from unravel.services.filtration import Matched
from unravel.services.search import LayeredSearch

router = APIRouter()


def _validate_length(ciphertext: str, settings: Settings) -> None:
    """Reject ciphertext over the configured maximum length."""
    if len(ciphertext) > settings.max_ciphertext_length:
        raise CiphertextTooLongError(len(ciphertext), settings.max_ciphertext_length)


@router.post(
    "",
    response_model=DecodeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Decode ciphertext",
    description=(
        "Run every decoder against the ciphertext in parallel and return the "
        "first decode that looks like plaintext, or every failed attempt."
    ),
)
async def decode_ciphertext(
    request: DecodeRequest,
    settings: SettingsDep,
    batch: BatchDep,
    checker: CheckerDep,
) -> DecodeResponse:
    """
    Peel one layer of encoding.

    A matched response carries the winning outcome only; an exhausted one
    carries every decoder's attempt, including unverified candidates.
    """
    _validate_length(request.ciphertext, settings)

    result = batch.run(request.ciphertext, checker)

    if isinstance(result, Matched):
        return DecodeResponse(status="matched", match=result.outcome)
    return DecodeResponse(status="exhausted", attempts=list(result.outcomes))


@router.post(
    "/search",
    response_model=SearchResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Decode nested encodings",
    description="Repeatedly decode the ciphertext, breadth-first, to peel several layers.",
)
async def search_ciphertext(
    request: SearchRequest,
    settings: SettingsDep,
    batch: BatchDep,
    checker: CheckerDep,
) -> SearchResponse:
    """Search up to ``max_depth`` layers deep for plaintext."""
    _validate_length(request.ciphertext, settings)

    search = LayeredSearch(batch, checker, max_depth=request.max_depth)
    result = search.search(request.ciphertext)

    return SearchResponse(
        found=result.found,
        plaintext=result.plaintext,
        path=result.path,
        nodes_expanded=result.nodes_expanded,
        depth_reached=result.depth_reached,
    )


@router.post(
    "/{decoder_name}",
    response_model=DecodeOutcome,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Decoder not found"},
    },
    summary="Decode with one decoder",
    description="Run a single named decoder against the ciphertext.",
)
async def decode_with_decoder(
    decoder_name: str,
    request: DecodeRequest,
    settings: SettingsDep,
    registry: RegistryDep,
    checker: CheckerDep,
) -> DecodeOutcome:
    """Force one decoder, e.g. to inspect every Caesar shift."""
    _validate_length(request.ciphertext, settings)

    # Unknown names raise DecoderNotFoundError, rendered as a 404
    decoder = registry.get_decoder(decoder_name)
    return decoder.attempt(request.ciphertext, checker)
