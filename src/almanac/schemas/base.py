"""Base Pydantic model with strict defaults for Almanac models.

Configuration schemas and the frozen remapping types (rules, stages,
pipelines) all inherit from this base so validation behaves the same
everywhere.
"""

from pydantic import BaseModel, ConfigDict


class AlmanacBaseModel(BaseModel):
    """Base model for all Almanac schemas.
    
    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Uses Python mode (not JSON mode)
    """
    
    model_config = ConfigDict(
        extra='forbid',           # Reject unknown fields
        validate_assignment=True, # Validate on field mutation
        use_enum_values=False,    # Keep StageId members as enums
        str_strip_whitespace=True,# Strip whitespace from strings
    )


class FrozenModel(AlmanacBaseModel):
    """Immutable variant used for values that are shared once built."""

    model_config = ConfigDict(
        extra='forbid',
        str_strip_whitespace=True,
        frozen=True,
    )
