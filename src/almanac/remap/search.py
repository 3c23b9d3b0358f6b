"""Minimal-location search over seed ranges.

Two strategies answer the same question, "what is the lowest location
whose seed lies in one of the seed ranges?":

**Step search** (``RangeSearch``) probes candidate locations and resolves
each one backward to a seed, never materializing the ranges. A coarse phase
strides ``step`` locations at a time until a probe lands in a range, backs
off one stride, then a fine phase walks one location at a time. It is only
exact when no valid window narrower than ``step`` sits between two coarse
probes; nothing checks that assumption.

**Interval propagation** (``interval_minimal_location``) pushes whole
ranges through every stage, splitting them at rule boundaries, and takes
the lowest start of the result. Exact, with no step-size assumption.
"""

import logging
from typing import Iterable, List, Optional

from almanac.contracts import EmptyInput, SearchExhausted
from almanac.remap.pipeline import Pipeline
from almanac.remap.resolver import Resolver

__all__ = ['RangeSearch', 'interval_minimal_location', 'propagate_ranges', 'DEFAULT_STEP']

logger = logging.getLogger(__name__)

DEFAULT_STEP = 1000


class RangeSearch:
    """Two-phase coarse/fine search for the minimal valid location.

    Parameters
    ----------
    resolver : Resolver
        Resolver over the pipeline to invert.
    ranges : iterable of range
        Half-open seed ranges. Sorted by start here; order only affects how
        early a membership test can stop.
    step : int, optional
        Coarse phase stride (default 1000).
    max_location : int, optional
        Highest location either phase may probe. None keeps the search
        unbounded, in which case it never returns if no location is valid.

    Examples
    --------
    >>> search = RangeSearch(resolver, pipeline.seed_ranges(), step=10)
    >>> search.find()
    46
    """

    def __init__(self, resolver: Resolver, ranges: Iterable[range],
                 step: int = DEFAULT_STEP, max_location: Optional[int] = None):
        if step < 1:
            raise ValueError(f"step must be >= 1, got {step}")
        if max_location is not None and max_location < 0:
            raise ValueError(f"max_location must be >= 0, got {max_location}")
        self.resolver = resolver
        self.ranges = sorted(ranges, key=lambda r: r.start)
        self.step = step
        self.max_location = max_location

    def contains(self, seed: int) -> bool:
        """True if ``seed`` falls inside any seed range."""
        for r in self.ranges:
            if r.start > seed:
                break
            if seed in r:
                return True
        return False

    def is_valid(self, location: int) -> bool:
        return self.contains(self.resolver.process_backward(location))

    def find(self) -> int:
        """Return the lowest location whose seed lies in a range.

        Raises
        ------
        SearchExhausted
            If ``max_location`` is set and passed without a match
        """
        start = self._coarse_phase()
        return self._fine_phase(start)

    def _exhausted(self, location: int) -> bool:
        return self.max_location is not None and location > self.max_location

    def _coarse_phase(self) -> int:
        location = 0
        while not self.is_valid(location):
            if self._exhausted(location + self.step):
                # the fine phase covers what is left below the bound
                logger.debug("Coarse phase reached bound %d at %d", self.max_location, location)
                return location
            location += self.step
        logger.debug("Coarse hit at location %d", location)
        # Back off one stride: the true minimum may sit before this probe
        if location > 0:
            location -= self.step
        return location

    def _fine_phase(self, location: int) -> int:
        while not self.is_valid(location):
            location += 1
            if self._exhausted(location):
                raise SearchExhausted(f"no valid location up to {self.max_location}")
        logger.debug("Fine phase settled on location %d", location)
        return location


def propagate_ranges(pipeline: Pipeline, ranges: Iterable[range]) -> List[range]:
    """Push half-open ranges forward through every stage of ``pipeline``."""
    current = [r for r in ranges if len(r) > 0]
    for stage in pipeline.stages:
        current = stage.apply_forward_ranges(current)
        logger.debug("%s: %d ranges", stage.stage_id.value, len(current))
    return current


def interval_minimal_location(pipeline: Pipeline, ranges: Optional[Iterable[range]] = None) -> int:
    """Exact minimal location over seed ranges via interval propagation.

    Parameters
    ----------
    pipeline : Pipeline
        Parsed almanac.
    ranges : iterable of range, optional
        Seed ranges; defaults to ``pipeline.seed_ranges()``.

    Raises
    ------
    EmptyInput
        If the ranges cover no seed at all
    """
    ranges = pipeline.seed_ranges() if ranges is None else ranges
    locations = propagate_ranges(pipeline, ranges)
    if not locations:
        raise EmptyInput("seed ranges cover no seeds")
    return min(r.start for r in locations)
