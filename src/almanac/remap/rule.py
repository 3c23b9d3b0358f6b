"""Single interval-shift rule."""

from typing import Optional

from pydantic import Field

from almanac.schemas.base import FrozenModel

__all__ = ['RangeRule']


class RangeRule(FrozenModel):
    """Shift values in ``[source_start, source_start + length)`` by a constant.

    The destination interval ``[destination_start, destination_start + length)``
    runs parallel to the source interval, so every rule is invertible on its
    own. A zero-length rule covers nothing and never matches.

    Examples
    --------
    >>> rule = RangeRule(source_start=98, destination_start=50, length=2)
    >>> rule.forward(99)
    51
    >>> rule.forward(100) is None
    True
    >>> rule.backward(50)
    98
    """

    source_start: int
    destination_start: int
    length: int = Field(ge=0)

    @property
    def delta(self) -> int:
        return self.destination_start - self.source_start

    @property
    def source_end(self) -> int:
        return self.source_start + self.length

    @property
    def destination_end(self) -> int:
        return self.destination_start + self.length

    @property
    def source_range(self) -> range:
        return range(self.source_start, self.source_end)

    @property
    def destination_range(self) -> range:
        return range(self.destination_start, self.destination_end)

    def forward(self, value: int) -> Optional[int]:
        """Return the shifted value, or None when outside the source interval."""
        if self.source_start <= value < self.source_end:
            return value + self.delta
        return None

    def backward(self, value: int) -> Optional[int]:
        """Return the unshifted value, or None when outside the destination interval."""
        if self.destination_start <= value < self.destination_end:
            return value - self.delta
        return None
