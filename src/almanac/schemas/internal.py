"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and frozen.

All .get() calls, fallback defaults, and validation logic are FORBIDDEN in
runtime code - everything is explicit here.
"""

from typing import Literal, Optional
from pydantic import ConfigDict, Field, field_validator, model_validator
from almanac.schemas.base import AlmanacBaseModel


_FROZEN = ConfigDict(
    extra='forbid',
    validate_assignment=True,
    str_strip_whitespace=True,
    frozen=True,
)


class InternalPuzzleConfig(AlmanacBaseModel):
    """Runtime puzzle selection."""
    year: int
    day: int = Field(ge=1, le=25)

    model_config = _FROZEN


class InternalFetchConfig(AlmanacBaseModel):
    """Runtime fetch configuration.

    Note: session_id may stay None; it is only required on a cache miss,
    which the fetcher reports as a FetchError.
    """
    base_url: str
    input_dir: str
    session_id: Optional[str]
    timeout_sec: float
    min_year: int
    max_year: int

    model_config = _FROZEN

    @field_validator("base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v):
        """Store the base URL without a trailing slash, whichever layer set it."""
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    @model_validator(mode="after")
    def check_year_bounds(self):
        if self.min_year > self.max_year:
            raise ValueError(
                f"min_year ({self.min_year}) is after max_year ({self.max_year})"
            )
        return self


class InternalSearchConfig(AlmanacBaseModel):
    """Runtime search configuration."""
    strategy: Literal["step", "interval"]
    step: int = Field(ge=1)
    max_location: Optional[int] = Field(ge=0)
    validate_disjoint: bool

    model_config = _FROZEN


class InternalLoggingConfig(AlmanacBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    log_file: Optional[str]

    model_config = _FROZEN


class InternalConfig(AlmanacBaseModel):
    """Authoritative runtime configuration.
    
    Runtime modules receive InternalConfig and access fields directly:
    
        def __init__(self, config: InternalConfig):
            self.step = config.search.step  # NOT .get()
    
    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    - NO validation
    
    All of that happens during config resolution, not in runtime code.
    """
    
    puzzle: InternalPuzzleConfig
    fetch: InternalFetchConfig
    search: InternalSearchConfig
    logging: InternalLoggingConfig
    
    model_config = _FROZEN
