"""ParamConfig: Defaults for the Almanac solver.

This module defines the complete default configuration. ALL tunable
parameters must have a default here. No runtime code should define
fallback values - this is the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from almanac.schemas.base import AlmanacBaseModel


# =============================================================================
# Nested Configuration Models
# =============================================================================

class PuzzleConfig(AlmanacBaseModel):
    """Which puzzle to solve."""
    year: int = Field(2023, ge=2015)
    day: int = Field(5, ge=1, le=25)


class FetchConfig(AlmanacBaseModel):
    """Puzzle input download and cache configuration."""
    base_url: str = "https://adventofcode.com"
    input_dir: str = Field("input", description="Root of the on-disk input cache")
    session_id: Optional[str] = Field(None, description="Value of the 'session' cookie")
    timeout_sec: float = Field(30.0, gt=0)
    min_year: int = Field(2015, ge=2015)
    max_year: int = Field(2023, ge=2015)


class SearchConfig(AlmanacBaseModel):
    """Minimal-location search configuration (range mode)."""
    strategy: Literal["step", "interval"] = "step"
    step: int = Field(1000, ge=1, description="Coarse phase stride")
    max_location: Optional[int] = Field(
        2**32, ge=0, description="Upper bound for the step search; None scans forever"
    )
    validate_disjoint: bool = True

    @field_validator("strategy", mode="before")
    @classmethod
    def normalize_strategy_name(cls, v):
        """Normalize strategy names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class LoggingConfig(AlmanacBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Optional[str] = None

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v):
        if isinstance(v, str):
            return v.upper().strip()
        return v


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(AlmanacBaseModel):
    """Complete configuration with all defaults.
    
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:
    
        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)
    
    Runtime code only sees InternalConfig.
    """
    
    puzzle: PuzzleConfig = Field(default_factory=PuzzleConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
