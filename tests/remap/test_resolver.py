import pytest

from almanac.contracts import EmptyInput
from almanac.remap import Resolver, StageId

pytestmark = [pytest.mark.unit, pytest.mark.remap]


def test_single_rule_pipeline(make_pipeline):
    pipeline = make_pipeline({StageId.SEED_TO_SOIL: [(10, 50, 5)]})
    resolver = Resolver(pipeline)
    assert resolver.process_forward(12) == 52
    assert resolver.process_forward(20) == 20


def test_two_stage_pipeline(make_pipeline):
    pipeline = make_pipeline({
        StageId.SEED_TO_SOIL: [(0, 100, 10)],
        StageId.SOIL_TO_FERTILIZER: [(100, 200, 10)],
    })
    resolver = Resolver(pipeline)
    assert resolver.process_forward(5) == 205
    assert resolver.process_backward(205) == 5


def test_backward_runs_stages_in_reverse(make_pipeline):
    # 3 -> 13 -> 23 forward; backward must undo the last stage first
    pipeline = make_pipeline({
        StageId.SEED_TO_SOIL: [(0, 10, 5)],
        StageId.HUMIDITY_TO_LOCATION: [(10, 20, 5)],
    })
    resolver = Resolver(pipeline)
    assert resolver.process_forward(3) == 23
    # walking the stages in forward order would stop at 13
    assert resolver.process_backward(23) == 3
    assert resolver.process_backward(13) == 3


def test_example_locations(example_pipeline):
    resolver = Resolver(example_pipeline)
    assert [resolver.process_forward(s) for s in (79, 14, 55, 13)] == [82, 43, 86, 35]


def test_example_round_trip(example_pipeline):
    resolver = Resolver(example_pipeline)
    for seed in range(0, 120):
        assert resolver.process_backward(resolver.process_forward(seed)) == seed


def test_minimal_forward_uses_pipeline_seeds(example_pipeline):
    assert Resolver(example_pipeline).minimal_forward() == 35


def test_minimal_forward_explicit_seeds(example_pipeline):
    assert Resolver(example_pipeline).minimal_forward([79, 14]) == 43


def test_minimal_forward_empty(make_pipeline):
    with pytest.raises(EmptyInput):
        Resolver(make_pipeline()).minimal_forward()
