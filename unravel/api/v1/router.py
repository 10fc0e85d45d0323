from fastapi import APIRouter

from unravel.api.v1.endpoints import check, decode, decoders

api_router = APIRouter()

api_router.include_router(
    decode.router,
    prefix="/decode",
    tags=["Decoding"],
)

api_router.include_router(
    decoders.router,
    prefix="/decoders",
    tags=["Decoders"],
)

api_router.include_router(
    check.router,
    prefix="/check",
    tags=["Checking"],
)
