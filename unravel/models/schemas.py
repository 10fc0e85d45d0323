from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ============================================================================
# Checker Schemas
# ============================================================================


class CheckResult(BaseModel):
    """Verdict of a plausibility checker on one string."""

    model_config = ConfigDict(frozen=True)

    is_identified: bool
    text: str
    checker_name: str
    checker_description: str
    # Why the checker matched, e.g. the name of the matched pattern
    description: str = ""
    link: str = ""


# ============================================================================
# Decoder Schemas
# ============================================================================


class DecoderMetadata(BaseModel):
    """Static descriptive metadata of a decoder."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    link: str
    tags: frozenset[str]
    popularity: float = Field(ge=0.0, le=1.0)
    expected_runtime: float = Field(ge=0.0)
    failure_runtime: float = Field(ge=0.0)
    expected_success: float = Field(ge=0.0, le=1.0)
    normalised_entropy: tuple[float, float]


class DecodeOutcome(BaseModel):
    """
    Result of one decoder attempt on one input.

    ``success`` is true only when a checker identified ``candidates[0]``.
    Unverified candidates may still be present when ``success`` is false,
    e.g. every Caesar shift when none of them looked like plaintext.
    """

    model_config = ConfigDict(frozen=True)

    decoder: str
    attempted_text: str
    success: bool = False
    candidates: tuple[str, ...] = ()
    checker_verdict: CheckResult | None = None
    description: str = ""
    tags: frozenset[str] = frozenset()

    @model_validator(mode="after")
    def _success_needs_verified_candidate(self) -> "DecodeOutcome":
        if not self.success:
            return self
        if not self.candidates:
            raise ValueError("successful outcome must carry a candidate")
        verdict = self.checker_verdict
        if verdict is None or not verdict.is_identified:
            raise ValueError("successful outcome must carry a positive verdict")
        if verdict.text != self.candidates[0]:
            raise ValueError("verdict must refer to the first candidate")
        return self

    @property
    def plaintext(self) -> str | None:
        """Leading candidate, if any."""
        return self.candidates[0] if self.candidates else None

    @classmethod
    def no_result(cls, decoder: Any, text: str) -> "DecodeOutcome":
        """Outcome for malformed, degenerate or failed attempts."""
        return cls(
            decoder=decoder.name,
            attempted_text=text,
            description=decoder.description,
            tags=decoder.tags,
        )

    @classmethod
    def from_check(
        cls,
        decoder: Any,
        text: str,
        candidates: list[str] | tuple[str, ...],
        verdict: CheckResult | None,
    ) -> "DecodeOutcome":
        """Build an outcome whose success follows the checker verdict."""
        success = verdict is not None and verdict.is_identified
        return cls(
            decoder=decoder.name,
            attempted_text=text,
            success=success,
            candidates=tuple(candidates),
            checker_verdict=verdict,
            description=decoder.description,
            tags=decoder.tags,
        )


# ============================================================================
# Request Schemas
# ============================================================================


class DecodeRequest(BaseModel):
    """Request schema for the /decode endpoints."""

    ciphertext: str = Field(min_length=1)


class SearchRequest(BaseModel):
    """Request schema for /decode/search."""

    ciphertext: str = Field(min_length=1)
    max_depth: int | None = Field(default=None, ge=1, le=10)


class CheckRequest(BaseModel):
    """Request schema for /check."""

    text: str = Field(min_length=1)


# ============================================================================
# Response Schemas
# ============================================================================


class DecodeResponse(BaseModel):
    """Response schema for a single dispatch round."""

    status: Literal["matched", "exhausted"]
    match: DecodeOutcome | None = None
    attempts: list[DecodeOutcome] = Field(default_factory=list)


class SearchResponse(BaseModel):
    """Response schema for a layered search."""

    found: bool
    plaintext: str | None = None
    path: list[DecodeOutcome] = Field(default_factory=list)
    nodes_expanded: int
    depth_reached: int


class DecodersResponse(BaseModel):
    """All registered decoders, in dispatch order."""

    decoders: list[DecoderMetadata]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
