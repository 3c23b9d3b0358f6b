"""Error types for the Almanac solver.

Every failure the solver can report derives from AlmanacError so the
command-line entry point can handle them uniformly.

Key distinction:
- AlmanacParseError: the input text is malformed (user data error)
- EmptyInput / SearchExhausted: a query has no answer
- FetchError: the input could not be obtained
- ContractViolation: a pipeline invariant broke (programmer error)
"""

from typing import Optional


class AlmanacError(Exception):
    """Base class for all Almanac errors."""


class AlmanacParseError(AlmanacError, ValueError):
    """Raised when almanac text cannot be turned into a pipeline.

    Parameters
    ----------
    message : str
        What went wrong.
    line : int, optional
        1-based line number in the input text.
    stage : str, optional
        Header name of the stage block being parsed.
    """

    def __init__(self, message: str, line: Optional[int] = None, stage: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.stage = stage

    def __str__(self):
        context = []
        if self.line is not None:
            context.append(f"line {self.line}")
        if self.stage is not None:
            context.append(f"stage '{self.stage}'")
        if context:
            return f"{self.message} ({', '.join(context)})"
        return self.message


class MalformedHeader(AlmanacParseError):
    """Stage header is unknown, lacks the ' map:' suffix, or repeats."""


class MalformedRule(AlmanacParseError):
    """Rule line is not exactly three integers, or has a negative length."""


class MissingSeeds(AlmanacParseError):
    """Seed line is absent or unparsable, or seeds do not pair up."""


class OverlappingRuleError(AlmanacParseError):
    """Two rules of one stage cover the same source values."""


class EmptyInput(AlmanacError, ValueError):
    """A minimum was requested over zero values."""


class SearchExhausted(AlmanacError, LookupError):
    """A bounded search reached its limit without finding a match."""


class FetchError(AlmanacError, RuntimeError):
    """Puzzle input is neither cached nor retrievable."""


class ContractViolation(AlmanacError, RuntimeError):
    """Raised when a pipeline contract is violated.

    This indicates a bug in solver logic, not bad user input. It means a
    stage did not produce the invariants it promised.
    """
    pass
