import random
from unittest.mock import MagicMock

import pytest

from models.enums import MetricStream
from models.metrics import ChartPoint, MetricSample, PricingPerformance
from utils.data_generation import MetricDataGenerator


@pytest.fixture
def generator(seeded_rng) -> MetricDataGenerator:
    return MetricDataGenerator(seeded_rng)


def test_generators_cover_every_stream(generator):
    generators = generator.generators()
    assert set(generators) == set(MetricStream)
    assert all(callable(fn) for fn in generators.values())


def test_same_seed_reproduces_samples():
    """Two generators seeded alike emit the same values (timestamps aside)."""
    gen_a = MetricDataGenerator(random.Random(7))
    gen_b = MetricDataGenerator(random.Random(7))
    for _ in range(5):
        a, b = gen_a.revenue(), gen_b.revenue()
        assert (a.value, a.change) == (b.value, b.change)
    assert gen_a.demand_trend() == gen_b.demand_trend()


@pytest.mark.parametrize("_", range(20))
def test_scalar_samples_within_bounds(generator, _):
    revenue = generator.revenue()
    assert isinstance(revenue, MetricSample)
    assert 12_400_000 * 0.99 <= revenue.value <= 12_400_000 * 1.01
    assert -0.09 <= revenue.change <= 0.21

    customers = generator.customers()
    assert 48_392 * 0.995 - 1 <= customers.value <= 48_392 * 1.005 + 1

    churn = generator.churn_rate()
    assert 3.1 <= churn.value <= 3.3

    accuracy = generator.ai_accuracy()
    assert 85.0 <= accuracy.value <= 99.9


def test_demand_trend_has_one_point_per_plan(generator):
    points = generator.demand_trend()
    assert [p.name for p in points] == [
        "Premium Plan",
        "Basic Plan",
        "Enterprise Plan",
        "Starter Plan",
    ]
    for point in points:
        assert isinstance(point, ChartPoint)
        assert point.predicted is not None
        assert 85 <= point.confidence <= 95


def test_pricing_performance_ranges(generator):
    perf = generator.pricing_performance()
    assert isinstance(perf, PricingPerformance)
    assert 20 <= perf.revenue <= 30
    assert 85 <= perf.conversion <= 95
    assert 10 <= perf.optimization <= 25


def test_generate_historical_data(generator):
    history = generator.generate_historical_data(12)
    assert len(history) == 12
    assert history[0].name == "Month 1"
    assert history[-1].name == "Month 12"
    # trend of +50k per period dominates noise and season over the year
    assert history[-1].value > history[0].value


def test_generate_forecast_data_confidence_decreases(generator):
    history = generator.generate_historical_data(12)
    forecast = generator.generate_forecast_data(history, 6)
    assert [p.name for p in forecast] == [f"Forecast {i}" for i in range(1, 7)]
    assert [p.confidence for p in forecast] == [92, 89, 86, 83, 80, 77]


def test_generate_forecast_data_confidence_floor(generator):
    history = [ChartPoint(name="Month 1", value=100), ChartPoint(name="Month 2", value=110)]
    forecast = generator.generate_forecast_data(history, 12)
    assert forecast[-1].confidence == 70


def test_generate_forecast_data_empty_history(generator):
    assert generator.generate_forecast_data([], 6) == []


def test_decimal_values_round_halves_up():
    rng = MagicMock(spec=random.Random)
    rng.random.return_value = 0.025
    perf = MetricDataGenerator(rng).pricing_performance()
    assert (perf.revenue, perf.conversion, perf.optimization) == (20.3, 85.3, 10.4)
