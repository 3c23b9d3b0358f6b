"""Pipeline: the seven stages in fixed order plus the seed list."""

from typing import Dict, List, Tuple

from almanac.contracts import MissingSeeds
from almanac.remap.stage import STAGE_ORDER, Stage, StageId
from almanac.schemas.base import FrozenModel

__all__ = ['Pipeline']


class Pipeline(FrozenModel):
    """Fully parsed almanac, immutable once built.

    ``stages`` always holds one Stage per StageId in STAGE_ORDER; stages the
    text never mentioned are empty and map every value to itself. ``seeds``
    is the raw integer list from the seed line, read either as discrete seed
    values or as consecutive (start, length) pairs.
    """

    stages: Tuple[Stage, ...]
    seeds: Tuple[int, ...] = ()

    @classmethod
    def from_stages(cls, stages: Dict[StageId, Stage], seeds=()) -> "Pipeline":
        """Place stages into their designated slots, filling gaps with empty stages."""
        ordered = tuple(
            stages[stage_id] if stage_id in stages else Stage(stage_id=stage_id)
            for stage_id in STAGE_ORDER
        )
        return cls(stages=ordered, seeds=tuple(seeds))

    def stage(self, stage_id: StageId) -> Stage:
        return self.stages[STAGE_ORDER.index(StageId(stage_id))]

    def seed_ranges(self) -> List[range]:
        """Seeds read as (start, length) pairs, as half-open ranges sorted by start.

        Raises
        ------
        MissingSeeds
            If the seed list has an odd number of values
        """
        if len(self.seeds) % 2:
            raise MissingSeeds(
                f"seed ranges need (start, length) pairs, got {len(self.seeds)} values"
            )
        pairs = zip(self.seeds[0::2], self.seeds[1::2])
        return sorted(
            (range(start, start + length) for start, length in pairs),
            key=lambda r: r.start,
        )
