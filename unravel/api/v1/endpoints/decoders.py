from fastapi import APIRouter

from unravel.dependencies import RegistryDep
from unravel.models.schemas import DecodersResponse

router = APIRouter()


@router.get(
    "",
    response_model=DecodersResponse,
    summary="List decoders",
    description="Metadata of every registered decoder, in dispatch order.",
)
async def list_decoders(registry: RegistryDep) -> DecodersResponse:
    return DecodersResponse(
        decoders=[decoder.metadata for decoder in registry.get_all_decoders()],
    )
