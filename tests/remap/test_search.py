import pytest

from almanac.contracts import EmptyInput, MissingSeeds, SearchExhausted
from almanac.remap import (
    RangeSearch,
    Resolver,
    StageId,
    interval_minimal_location,
    propagate_ranges,
)

pytestmark = [pytest.mark.unit, pytest.mark.remap]


def swap(lo, mid, hi):
    """Rules exchanging blocks [lo, mid) and [mid, hi); a bijection on [lo, hi)."""
    return [(lo, lo + (hi - mid), mid - lo), (mid, lo, hi - mid)]


@pytest.fixture
def bijective_pipeline(make_pipeline):
    return make_pipeline(
        {
            StageId.SEED_TO_SOIL: swap(0, 10, 30),
            StageId.SOIL_TO_FERTILIZER: swap(5, 8, 40),
            StageId.FERTILIZER_TO_WATER: swap(20, 33, 60),
            StageId.WATER_TO_LIGHT: swap(0, 50, 70),
            StageId.LIGHT_TO_TEMPERATURE: swap(15, 16, 25),
            StageId.TEMPERATURE_TO_HUMIDITY: swap(0, 35, 80),
            StageId.HUMIDITY_TO_LOCATION: swap(40, 70, 90),
        },
        seeds=(62, 3, 25, 4, 70, 8),
    )


def brute_force_minimum(resolver, ranges, limit):
    for location in range(limit):
        seed = resolver.process_backward(location)
        if any(seed in r for r in ranges):
            return location
    return None


def test_identity_pipeline_single_range(make_pipeline):
    pipeline = make_pipeline(seeds=(50, 5))
    resolver = Resolver(pipeline)

    assert RangeSearch(resolver, pipeline.seed_ranges(), step=5).find() == 50
    assert RangeSearch(resolver, pipeline.seed_ranges(), step=1).find() == 50
    assert interval_minimal_location(pipeline) == 50


def test_example_minimum(example_pipeline):
    resolver = Resolver(example_pipeline)
    ranges = example_pipeline.seed_ranges()

    assert interval_minimal_location(example_pipeline) == 46
    assert RangeSearch(resolver, ranges, step=10).find() == 46
    assert RangeSearch(resolver, ranges, step=1).find() == 46


def test_minimality_exhaustive(bijective_pipeline):
    resolver = Resolver(bijective_pipeline)
    ranges = bijective_pipeline.seed_ranges()

    expected = brute_force_minimum(resolver, ranges, limit=200)
    assert expected is not None

    assert RangeSearch(resolver, ranges, step=1).find() == expected
    assert interval_minimal_location(bijective_pipeline) == expected
    # on a bijection the backward minimum is also the forward minimum
    assert expected == min(resolver.process_forward(s) for r in ranges for s in r)


def test_minimality_every_step_size_on_wide_window(make_pipeline):
    # one wide valid window: the step search is exact for any step up to its width
    pipeline = make_pipeline(
        {StageId.SEED_TO_SOIL: [(1000, 0, 500), (0, 500, 1000)]},
        seeds=(1200, 300),
    )
    resolver = Resolver(pipeline)
    ranges = pipeline.seed_ranges()
    expected = brute_force_minimum(resolver, ranges, limit=2000)
    assert expected == 200

    for step in (1, 7, 50, 100, 300):
        assert RangeSearch(resolver, ranges, step=step).find() == expected


def test_location_zero_is_found(make_pipeline):
    pipeline = make_pipeline(seeds=(0, 10))
    resolver = Resolver(pipeline)
    assert RangeSearch(resolver, pipeline.seed_ranges()).find() == 0


def test_narrow_window_exhausts_bounded_search(make_pipeline):
    pipeline = make_pipeline(seeds=(50, 5))
    search = RangeSearch(Resolver(pipeline), pipeline.seed_ranges(), step=1000, max_location=10_000)
    with pytest.raises(SearchExhausted):
        search.find()


def test_bound_between_coarse_probes_is_still_scanned(make_pipeline):
    pipeline = make_pipeline(seeds=(1200, 1_000_000))
    search = RangeSearch(Resolver(pipeline), pipeline.seed_ranges(), step=1000, max_location=1500)
    assert search.find() == 1200


def test_bound_just_below_first_valid_location(make_pipeline):
    pipeline = make_pipeline(seeds=(1200, 10))
    search = RangeSearch(Resolver(pipeline), pipeline.seed_ranges(), step=1000, max_location=1199)
    with pytest.raises(SearchExhausted):
        search.find()


def test_step_search_can_miss_narrow_window(make_pipeline):
    # the window at 5 is narrower than the step and lies before the first coarse hit
    pipeline = make_pipeline(seeds=(5, 1, 2500, 1000))
    search = RangeSearch(Resolver(pipeline), pipeline.seed_ranges(), step=1000)

    assert search.find() == 2500
    assert interval_minimal_location(pipeline) == 5


def test_contains_uses_sorted_ranges(make_pipeline):
    search = RangeSearch(Resolver(make_pipeline()), [range(40, 50), range(10, 20), range(15, 30)])
    assert [r.start for r in search.ranges] == [10, 15, 40]
    assert search.contains(25)
    assert search.contains(10)
    assert not search.contains(30)
    assert not search.contains(5)
    assert not search.contains(50)


@pytest.mark.parametrize("kwargs", [{"step": 0}, {"max_location": -1}])
def test_invalid_search_parameters(make_pipeline, kwargs):
    with pytest.raises(ValueError):
        RangeSearch(Resolver(make_pipeline()), [range(0, 1)], **kwargs)


def test_odd_seed_count_has_no_ranges(make_pipeline):
    with pytest.raises(MissingSeeds):
        make_pipeline(seeds=(1, 2, 3)).seed_ranges()


def test_seed_ranges_are_sorted_half_open(make_pipeline):
    pipeline = make_pipeline(seeds=(79, 14, 55, 13))
    assert pipeline.seed_ranges() == [range(55, 68), range(79, 93)]


def test_propagate_ranges_covers_forward_image(bijective_pipeline):
    resolver = Resolver(bijective_pipeline)
    ranges = bijective_pipeline.seed_ranges()
    images = set()
    for r in propagate_ranges(bijective_pipeline, ranges):
        images.update(r)
    assert images == {resolver.process_forward(s) for r in ranges for s in r}


def test_interval_search_with_no_seeds(make_pipeline):
    with pytest.raises(EmptyInput):
        interval_minimal_location(make_pipeline(seeds=()))
