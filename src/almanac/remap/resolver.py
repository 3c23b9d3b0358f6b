"""Forward and backward resolution of values through a pipeline."""

import logging
from typing import Iterable, Optional

from almanac.contracts import EmptyInput
from almanac.remap.pipeline import Pipeline

__all__ = ['Resolver']

logger = logging.getLogger(__name__)


class Resolver:
    """Push values through a Pipeline in either direction.

    Forward resolution goes seed -> soil -> ... -> location; backward
    resolution walks the same stages in exact reverse. The resolver only
    reads the (immutable) pipeline, so one instance can serve any number of
    threads.

    Example usage::

        resolver = Resolver(parse_almanac(text))
        resolver.process_forward(79)    # 82
        resolver.process_backward(82)   # 79
        resolver.minimal_forward()      # lowest location over all seeds
    """

    def __init__(self, pipeline: Pipeline):
        self.pipeline = pipeline
        self._forward_stages = pipeline.stages
        self._backward_stages = tuple(reversed(pipeline.stages))

    def process_forward(self, value: int) -> int:
        for stage in self._forward_stages:
            value = stage.apply_forward(value)
        return value

    def process_backward(self, value: int) -> int:
        for stage in self._backward_stages:
            value = stage.apply_backward(value)
        return value

    def minimal_forward(self, seeds: Optional[Iterable[int]] = None) -> int:
        """Lowest forward-resolved value over ``seeds`` (the pipeline's seeds by default).

        Raises
        ------
        EmptyInput
            If there are no seeds
        """
        seeds = self.pipeline.seeds if seeds is None else seeds
        try:
            return min(self.process_forward(seed) for seed in seeds)
        except ValueError as e:
            raise EmptyInput("almanac contained no seeds") from e
