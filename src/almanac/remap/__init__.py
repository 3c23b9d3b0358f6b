"""Range remapping: rules, stages, pipelines and the searches over them."""

from almanac.remap.rule import RangeRule
from almanac.remap.stage import STAGE_ORDER, Stage, StageId
from almanac.remap.pipeline import Pipeline
from almanac.remap.parser import parse_almanac
from almanac.remap.resolver import Resolver
from almanac.remap.search import RangeSearch, interval_minimal_location, propagate_ranges

__all__ = [
    'RangeRule',
    'Stage',
    'StageId',
    'STAGE_ORDER',
    'Pipeline',
    'parse_almanac',
    'Resolver',
    'RangeSearch',
    'interval_minimal_location',
    'propagate_ranges',
]
