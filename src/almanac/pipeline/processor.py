"""Day processor: input text in, both puzzle answers out.

Fetches (or reads) the input, parses it into a Pipeline, then answers:

- Part one: lowest location over the discrete seed list.
- Part two: lowest location whose seed lies in one of the seed ranges,
  using the configured search strategy.
"""

import logging
from typing import TYPE_CHECKING, Optional

from almanac.contracts import require
from almanac.fetch import PuzzleInputFetcher
from almanac.remap import (
    Pipeline,
    RangeSearch,
    Resolver,
    interval_minimal_location,
    parse_almanac,
)
from almanac.schemas.base import FrozenModel

if TYPE_CHECKING:
    from almanac.schemas import InternalConfig

__all__ = ['AlmanacProcessor', 'DayResult']

logger = logging.getLogger(__name__)


class DayResult(FrozenModel):
    """Answers for one puzzle day."""
    year: int
    day: int
    part_one: int
    part_two: int
    strategy: str


class AlmanacProcessor:
    """Solves the seed/location puzzle for one input.

    Example usage::

        processor = AlmanacProcessor(config)
        result = processor.run(2023, 5)
        result.part_one, result.part_two
    """

    def __init__(self, config: "InternalConfig", fetcher: Optional[PuzzleInputFetcher] = None):
        """Initialize processor with validated configuration.

        Parameters
        ----------
        config : InternalConfig
            Fully validated runtime configuration.

        fetcher : PuzzleInputFetcher, optional
            Source of input text for ``run()``. If None, one is built from
            ``config.fetch``. Allows injection for testing.
        """
        self.config = config
        self.fetcher = fetcher or PuzzleInputFetcher(config.fetch)
        self.strategy = config.search.strategy

        logger.debug(
            "AlmanacProcessor initialized: strategy=%s, step=%d, max_location=%s",
            self.strategy, config.search.step, config.search.max_location,
        )

    def run(self, year: Optional[int] = None, day: Optional[int] = None) -> DayResult:
        """Fetch the input for ``year``/``day`` (config defaults) and solve it."""
        year = self.config.puzzle.year if year is None else year
        day = self.config.puzzle.day if day is None else day
        text = self.fetcher.get_input(year, day)
        return self.solve(text, year=year, day=day)

    def solve(self, text: str, year: Optional[int] = None, day: Optional[int] = None) -> DayResult:
        """Parse ``text`` and compute both answers."""
        pipeline = parse_almanac(text, validate_disjoint=self.config.search.validate_disjoint)
        resolver = Resolver(pipeline)

        part_one = self.part_one(resolver)
        logger.info("Part One: %d", part_one)

        part_two = self.part_two(pipeline, resolver)
        logger.info("Part Two: %d", part_two)

        return DayResult(
            year=self.config.puzzle.year if year is None else year,
            day=self.config.puzzle.day if day is None else day,
            part_one=part_one,
            part_two=part_two,
            strategy=self.strategy,
        )

    def part_one(self, resolver: Resolver) -> int:
        location = resolver.minimal_forward()
        require(
            any(resolver.process_forward(seed) == location for seed in resolver.pipeline.seeds),
            f"Part one contract violated: location {location} is not the image of any seed"
        )
        return location

    def part_two(self, pipeline: Pipeline, resolver: Resolver) -> int:
        ranges = pipeline.seed_ranges()
        if self.strategy == "step":
            search = RangeSearch(
                resolver,
                ranges,
                step=self.config.search.step,
                max_location=self.config.search.max_location,
            )
            return search.find()
        elif self.strategy == "interval":
            return interval_minimal_location(pipeline, ranges)
        else:
            raise ValueError(f"Unknown search strategy: {self.strategy}")
