"""`Almanac` - range-remapping pipelines for the seed/location puzzle.

Subpackages:
- remap: Range rules, stages, parser, resolver, range search
- pipeline: Per-day processor (parse, solve, report)
- fetch: Puzzle input download and on-disk cache
- schemas: Layered pydantic configuration
- contracts: Error types and fail-fast invariants
- cli: Command-line entry point
"""

__version__ = "0.1.0"
