"""Pipeline and stage contracts.

Checked once, right after parsing, so that the resolver and the searches
can rely on a well-formed pipeline without re-checking.
"""

from typing import TYPE_CHECKING

from almanac.contracts.base import require
from almanac.contracts.failure import OverlappingRuleError

if TYPE_CHECKING:
    from almanac.remap.pipeline import Pipeline
    from almanac.remap.stage import Stage


def assert_pipeline_order(pipeline: "Pipeline") -> None:
    """Enforce that the pipeline holds every stage exactly once, in order.

    Raises
    ------
    ContractViolation
        If stages are missing, duplicated, or out of order
    """
    from almanac.remap.stage import STAGE_ORDER

    found = tuple(stage.stage_id for stage in pipeline.stages)
    require(
        len(found) == len(STAGE_ORDER),
        f"Pipeline contract violated: {len(found)} stages, expected {len(STAGE_ORDER)}"
    )
    require(
        found == STAGE_ORDER,
        "Pipeline contract violated: stages out of order: "
        + ", ".join(stage_id.value for stage_id in found)
    )


def assert_disjoint_rules(stage: "Stage") -> None:
    """Reject a stage whose rules overlap in source space.

    Overlapping rules make the result depend on rule order, so a stage
    that passes this check maps every value the same way whichever rule
    is scanned first.

    Raises
    ------
    OverlappingRuleError
        For the first overlapping pair found
    """
    overlaps = stage.overlapping_rules()
    if overlaps:
        first, second = overlaps[0]
        raise OverlappingRuleError(
            f"rules overlap in source space: "
            f"[{first.source_start}, {first.source_end}) and "
            f"[{second.source_start}, {second.source_end})",
            stage=stage.stage_id.value,
        )
