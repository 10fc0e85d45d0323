from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from unravel.core.config import Settings, get_settings
from unravel.services.checkers import CombinedChecker
from unravel.services.decoders import DecoderRegistry
from unravel.services.filtration import DecoderBatch, filter_and_get_decoders


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


@lru_cache
def get_checker() -> CombinedChecker:
    """Shared combined checker, built once."""
    return CombinedChecker()


@lru_cache
def get_batch() -> DecoderBatch:
    """Shared batch of every registered decoder, built once."""
    return filter_and_get_decoders()


def get_registry() -> DecoderRegistry:
    return DecoderRegistry()


CheckerDep = Annotated[CombinedChecker, Depends(get_checker)]
BatchDep = Annotated[DecoderBatch, Depends(get_batch)]
RegistryDep = Annotated[DecoderRegistry, Depends(get_registry)]
