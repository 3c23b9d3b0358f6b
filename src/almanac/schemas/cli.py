"""CLIConfig: Command-line operational overrides.

Minimal configuration for parameters that commonly change between runs:
which puzzle, where the input cache lives, which search strategy, verbosity.

This schema handles command-line arguments parsed by argparse.
"""

from typing import Literal, Optional, Union
from pydantic import field_validator
from almanac.schemas.base import AlmanacBaseModel
from almanac.schemas.user import UNBOUNDED, normalize_max_location


class CLIConfig(AlmanacBaseModel):
    """Command-line configuration overrides.
    
    Highest priority in config resolution.
    
    Usage
    -----
        cli_cfg = CLIConfig(year=2023, day=5, strategy="interval")
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """
    
    year: Optional[int] = None
    day: Optional[int] = None
    input_dir: Optional[str] = None
    strategy: Optional[Literal["step", "interval"]] = None
    step: Optional[int] = None
    max_location: Optional[Union[int, Literal["unbounded"]]] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    @field_validator("max_location", mode="before")
    @classmethod
    def coerce_max_location(cls, v):
        return normalize_max_location(v)
    
    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.
        
        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        puzzle = {}
        if self.year is not None:
            puzzle["year"] = self.year
        if self.day is not None:
            puzzle["day"] = self.day
        if puzzle:
            overrides["puzzle"] = puzzle

        if self.input_dir is not None:
            overrides["fetch"] = {"input_dir": str(self.input_dir)}

        search = {}
        if self.strategy is not None:
            search["strategy"] = self.strategy
        if self.step is not None:
            search["step"] = self.step
        if self.max_location is not None:
            search["max_location"] = None if self.max_location == UNBOUNDED else self.max_location
        if search:
            overrides["search"] = search
        
        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}
        
        return overrides
