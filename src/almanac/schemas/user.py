"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs in a variety of formats, with uppercase
aliases matching the environment variables the solver has always read
(AOC_URL, AOC_INPUT_DIR, AOC_SESSION_ID). Unknown keys are ignored, so a
raw ``os.environ`` mapping validates as-is.

UserConfig is intentionally minimal - users only specify what they want
to override from the defaults.
"""

import os
from typing import Literal, Optional, Union
from pydantic import Field, field_validator
from almanac.schemas.base import AlmanacBaseModel


UNBOUNDED = "unbounded"


def normalize_max_location(v):
    """Map the spellings of "no upper bound" onto a single sentinel."""
    if isinstance(v, str) and v.strip().lower() in ("", "none", UNBOUNDED):
        return UNBOUNDED
    return v


class UserSearchConfig(AlmanacBaseModel):
    """User-facing search config."""
    strategy: Optional[str] = None
    step: Optional[int] = None
    max_location: Optional[Union[int, Literal["unbounded"]]] = None
    validate_disjoint: Optional[bool] = None

    @field_validator("strategy", mode="before")
    @classmethod
    def normalize_strategy(cls, v):
        """Normalize strategy names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("max_location", mode="before")
    @classmethod
    def coerce_max_location(cls, v):
        return normalize_max_location(v)


class UserFetchConfig(AlmanacBaseModel):
    """User-facing fetch config."""
    base_url: Optional[str] = None
    input_dir: Optional[str] = None
    session_id: Optional[str] = None
    timeout_sec: Optional[float] = None


class UserConfig(AlmanacBaseModel):
    """User configuration with flat aliases and optional nested overrides.
    
    Usage
    -----
        user_cfg = UserConfig.model_validate({
            "AOC_SESSION_ID": "53616c74...",
            "AOC_INPUT_DIR": "~/aoc/input",
            "SEARCH_STRATEGY": "interval",
        })

        # Or straight from the environment:
        user_cfg = UserConfig.from_environ()

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """
    
    # Fetch settings (environment-style aliases)
    base_url: Optional[str] = Field(None, alias="AOC_URL")
    input_dir: Optional[str] = Field(None, alias="AOC_INPUT_DIR")
    session_id: Optional[str] = Field(None, alias="AOC_SESSION_ID")

    # Puzzle selection
    year: Optional[int] = Field(None, alias="AOC_YEAR")
    day: Optional[int] = Field(None, alias="AOC_DAY")

    # Search settings
    strategy: Optional[str] = Field(None, alias="SEARCH_STRATEGY")
    step: Optional[int] = Field(None, alias="SEARCH_STEP")
    max_location: Optional[Union[int, Literal["unbounded"]]] = Field(None, alias="MAX_LOCATION")

    # Logging
    log_level: Optional[str] = Field(None, alias="LOG_LEVEL")
    log_file: Optional[str] = Field(None, alias="LOG_FILE")

    # Nested overrides (advanced users)
    fetch: Optional[UserFetchConfig] = None
    search: Optional[UserSearchConfig] = None
    
    model_config = AlmanacBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unrelated keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @classmethod
    def from_environ(cls, environ=None) -> "UserConfig":
        """Build a UserConfig from environment variables."""
        environ = os.environ if environ is None else environ
        return cls.model_validate(dict(environ))

    @field_validator("strategy", mode="before")
    @classmethod
    def normalize_strategy(cls, v):
        """Normalize strategy names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @field_validator("max_location", mode="before")
    @classmethod
    def coerce_max_location(cls, v):
        return normalize_max_location(v)

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.
        
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

        # Fetch section
        fetch = {}
        if self.base_url is not None:
            fetch["base_url"] = self.base_url
        if self.input_dir is not None:
            fetch["input_dir"] = str(self.input_dir)
        if self.session_id is not None:
            fetch["session_id"] = self.session_id

        # Merge with explicit fetch config
        if self.fetch is not None:
            fetch.update(self.fetch.model_dump(exclude_none=True))

        if fetch:
            overrides["fetch"] = fetch

        # Search section
        search = {}
        if self.strategy is not None:
            search["strategy"] = self.strategy
        if self.step is not None:
            search["step"] = self.step
        if self.max_location is not None:
            search["max_location"] = self.max_location

        if self.search is not None:
            search.update(self.search.model_dump(exclude_none=True))

        if search.get("max_location") == UNBOUNDED:
            search["max_location"] = None

        if search:
            overrides["search"] = search

        logging_overrides = {}
        if self.log_level is not None:
            logging_overrides["level"] = self.log_level
        if self.log_file is not None:
            logging_overrides["log_file"] = self.log_file
        if logging_overrides:
            overrides["logging"] = logging_overrides

        return overrides
