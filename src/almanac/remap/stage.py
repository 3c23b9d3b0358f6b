"""Stages: ordered rule sets applied as one translation step.

A stage only stores the rules that move values. Anything the rules do not
cover maps to itself, so no stage ever fails.
"""

from enum import Enum
from typing import Iterable, List, Tuple

from almanac.remap.rule import RangeRule
from almanac.schemas.base import FrozenModel

__all__ = ['StageId', 'STAGE_ORDER', 'Stage']


class StageId(str, Enum):
    """Identifiers of the seven translation stages, keyed by header name."""
    SEED_TO_SOIL = "seed-to-soil"
    SOIL_TO_FERTILIZER = "soil-to-fertilizer"
    FERTILIZER_TO_WATER = "fertilizer-to-water"
    WATER_TO_LIGHT = "water-to-light"
    LIGHT_TO_TEMPERATURE = "light-to-temperature"
    TEMPERATURE_TO_HUMIDITY = "temperature-to-humidity"
    HUMIDITY_TO_LOCATION = "humidity-to-location"

    @property
    def source(self) -> str:
        return self.value.split("-to-")[0]

    @property
    def destination(self) -> str:
        return self.value.split("-to-")[1]


# Pipeline position is defined here, not by the order headers appear in text
STAGE_ORDER: Tuple[StageId, ...] = (
    StageId.SEED_TO_SOIL,
    StageId.SOIL_TO_FERTILIZER,
    StageId.FERTILIZER_TO_WATER,
    StageId.WATER_TO_LIGHT,
    StageId.LIGHT_TO_TEMPERATURE,
    StageId.TEMPERATURE_TO_HUMIDITY,
    StageId.HUMIDITY_TO_LOCATION,
)


class Stage(FrozenModel):
    """One translation step (e.g. seed to soil).

    Rules are scanned in stored order and the first match wins. Valid
    inputs have pairwise disjoint source intervals, which makes the order
    irrelevant; ``overlapping_rules()`` finds the pairs that break this.
    """

    stage_id: StageId
    rules: Tuple[RangeRule, ...] = ()

    def apply_forward(self, value: int) -> int:
        for rule in self.rules:
            mapped = rule.forward(value)
            if mapped is not None:
                return mapped
        return value

    def apply_backward(self, value: int) -> int:
        for rule in self.rules:
            mapped = rule.backward(value)
            if mapped is not None:
                return mapped
        return value

    def apply_forward_ranges(self, ranges: Iterable[range]) -> List[range]:
        """Map half-open intervals through the stage in one pass.

        Each interval is split at rule boundaries. A piece covered by a rule
        is shifted by that rule's delta (first match wins, as in
        ``apply_forward``); pieces no rule covers pass through unchanged.

        Parameters
        ----------
        ranges : iterable of range
            Half-open input intervals (step 1). Empty ranges are dropped.

        Returns
        -------
        list of range
            Output intervals. Their union is exactly the image of the inputs.
        """
        mapped: List[range] = []
        pending = [r for r in ranges if len(r) > 0]

        for rule in self.rules:
            if not pending:
                break
            remaining = []
            for piece in pending:
                lo = max(piece.start, rule.source_start)
                hi = min(piece.stop, rule.source_end)
                if lo >= hi:
                    remaining.append(piece)
                    continue
                mapped.append(range(lo + rule.delta, hi + rule.delta))
                if piece.start < lo:
                    remaining.append(range(piece.start, lo))
                if hi < piece.stop:
                    remaining.append(range(hi, piece.stop))
            pending = remaining

        return mapped + pending

    def overlapping_rules(self) -> List[Tuple[RangeRule, RangeRule]]:
        """Return pairs of rules whose source intervals intersect.

        Zero-length rules cover nothing and never overlap.
        """
        live = sorted(
            (rule for rule in self.rules if rule.length > 0),
            key=lambda rule: rule.source_start,
        )
        overlaps = []
        for i, rule in enumerate(live):
            for other in live[i + 1:]:
                if other.source_start >= rule.source_end:
                    break
                overlaps.append((rule, other))
        return overlaps
