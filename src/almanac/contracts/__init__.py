"""Error types and fail-fast enforcement of pipeline invariants.

Key principle:
- Pydantic validates config correctness
- The parser validates input text
- Contracts validate pipeline correctness
"""

from almanac.contracts.failure import (
    AlmanacError,
    AlmanacParseError,
    ContractViolation,
    EmptyInput,
    FetchError,
    MalformedHeader,
    MalformedRule,
    MissingSeeds,
    OverlappingRuleError,
    SearchExhausted,
)
from almanac.contracts.base import require
from almanac.contracts.pipeline import assert_disjoint_rules, assert_pipeline_order

__all__ = [
    "AlmanacError",
    "AlmanacParseError",
    "ContractViolation",
    "EmptyInput",
    "FetchError",
    "MalformedHeader",
    "MalformedRule",
    "MissingSeeds",
    "OverlappingRuleError",
    "SearchExhausted",
    "require",
    "assert_disjoint_rules",
    "assert_pipeline_order",
]
