"""Per-day processing."""

from almanac.pipeline.processor import AlmanacProcessor, DayResult

__all__ = ['AlmanacProcessor', 'DayResult']
