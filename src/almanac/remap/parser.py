"""Almanac text parser.

Turns puzzle text into a Pipeline::

    seeds: 79 14 55 13

    seed-to-soil map:
    50 98 2
    52 50 48

    soil-to-fertilizer map:
    ...

Blocks are separated by blank lines. Rule lines list destination start,
source start and length, in that order. Every block is parsed into a fresh
Stage; nothing is accumulated outside the call. Any error aborts the whole
parse, so callers never see a partial pipeline.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from pydantic import ValidationError

from almanac.contracts import (
    MalformedHeader,
    MalformedRule,
    MissingSeeds,
    assert_disjoint_rules,
    assert_pipeline_order,
)
from almanac.remap.pipeline import Pipeline
from almanac.remap.rule import RangeRule
from almanac.remap.stage import Stage, StageId

__all__ = ['parse_almanac', 'parse_seeds', 'parse_stage', 'parse_rule']

logger = logging.getLogger(__name__)

SEEDS_PREFIX = "seeds:"
HEADER_SUFFIX = " map:"

# (first line number, lines) for one blank-line separated block
Block = Tuple[int, List[str]]


def _split_blocks(text: str) -> Iterator[Block]:
    """Yield blank-line separated blocks with their 1-based starting line."""
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    block: List[str] = []
    start = 1
    for lineno, line in enumerate(lines, start=1):
        if line.strip():
            if not block:
                start = lineno
            block.append(line.strip())
        elif block:
            yield start, block
            block = []
    if block:
        yield start, block


def parse_seeds(block: Block) -> Tuple[int, ...]:
    """Parse the seed block (``seeds:`` followed by integers, possibly wrapped).

    Raises
    ------
    MissingSeeds
        If the prefix is absent or a token is not an integer
    """
    start, lines = block
    joined = " ".join(lines)
    if not joined.startswith(SEEDS_PREFIX):
        raise MissingSeeds(f"expected '{SEEDS_PREFIX}' line, got {lines[0]!r}", line=start)

    seeds = []
    for token in joined[len(SEEDS_PREFIX):].split():
        try:
            seeds.append(int(token))
        except ValueError as e:
            raise MissingSeeds(f"seed {token!r} is not an integer", line=start) from e
    return tuple(seeds)


def parse_rule(line: str, lineno: Optional[int] = None, stage: Optional[str] = None) -> RangeRule:
    """Parse ``destination source length`` into a RangeRule.

    Raises
    ------
    MalformedRule
        If the line is not exactly three integers or the length is negative
    """
    fields = line.split()
    if len(fields) != 3:
        raise MalformedRule(
            f"expected 'destination source length', got {line!r}", line=lineno, stage=stage
        )
    try:
        destination, source, length = (int(field) for field in fields)
    except ValueError as e:
        raise MalformedRule(f"non-integer field in {line!r}", line=lineno, stage=stage) from e

    try:
        return RangeRule(source_start=source, destination_start=destination, length=length)
    except ValidationError as e:
        raise MalformedRule(f"negative length in {line!r}", line=lineno, stage=stage) from e


def parse_stage(block: Block) -> Stage:
    """Parse one ``<name> map:`` block into a Stage.

    Raises
    ------
    MalformedHeader
        If the header lacks the ' map:' suffix or names an unknown stage
    MalformedRule
        If the block has no rule lines or a rule line is malformed
    """
    start, lines = block
    header, body = lines[0], lines[1:]

    if not header.endswith(HEADER_SUFFIX):
        raise MalformedHeader(f"header {header!r} does not end with '{HEADER_SUFFIX}'", line=start)
    name = header[: -len(HEADER_SUFFIX)].strip()
    try:
        stage_id = StageId(name)
    except ValueError as e:
        raise MalformedHeader(f"unknown block type: {name}", line=start) from e

    if not body:
        raise MalformedRule("stage has no rules", line=start, stage=name)

    rules = tuple(
        parse_rule(line, lineno=start + offset, stage=name)
        for offset, line in enumerate(body, start=1)
    )
    return Stage(stage_id=stage_id, rules=rules)


def parse_almanac(text: str, validate_disjoint: bool = True) -> Pipeline:
    """Parse almanac text into a Pipeline.

    Parameters
    ----------
    text : str
        Raw puzzle input.
    validate_disjoint : bool, optional
        Reject stages whose rules overlap in source space (default True).
        With False, overlapping rules are kept and the first match wins.

    Returns
    -------
    Pipeline
        Seven stages in pipeline order, regardless of text order.

    Raises
    ------
    MissingSeeds, MalformedHeader, MalformedRule, OverlappingRuleError
    """
    blocks = _split_blocks(text)
    first = next(blocks, None)
    if first is None:
        raise MissingSeeds("input is empty")
    seeds = parse_seeds(first)

    stages: Dict[StageId, Stage] = {}
    for block in blocks:
        stage = parse_stage(block)
        if stage.stage_id in stages:
            raise MalformedHeader(
                f"duplicate block type: {stage.stage_id.value}", line=block[0]
            )
        if validate_disjoint:
            assert_disjoint_rules(stage)
        stages[stage.stage_id] = stage
        logger.debug("Parsed %s: %d rules", stage.stage_id.value, len(stage.rules))

    missing = [stage_id.value for stage_id in StageId if stage_id not in stages]
    if missing:
        logger.warning("No block for %s; treating as identity", ", ".join(missing))

    pipeline = Pipeline.from_stages(stages, seeds)
    assert_pipeline_order(pipeline)
    logger.debug("Parsed almanac: %d seeds, %d stages", len(seeds), len(stages))
    return pipeline
