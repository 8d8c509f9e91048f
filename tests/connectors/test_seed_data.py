import pytest

from connectors.seed_data import SeedData
from models.customer import CustomerFeatures
from models.pricing import MarketState


@pytest.fixture
def seed() -> SeedData:
    return SeedData()


def test_market_states(seed):
    states = seed.market_states()
    assert list(states) == ["premium-plan", "basic-plan", "enterprise-plan"]
    assert all(isinstance(s, MarketState) for s in states.values())
    premium = states["premium-plan"]
    assert (premium.base_price, premium.demand, premium.competition, premium.seasonality) == (
        99,
        0.85,
        0.72,
        1.08,
    )


def test_historical_demand_is_immutable(seed):
    history = seed.historical_demand()
    assert set(history) == {"Premium Plan", "Basic Plan", "Enterprise Plan", "Starter Plan"}
    assert all(len(series) == 12 for series in history.values())
    assert isinstance(history["Premium Plan"], tuple)


def test_customer_features(seed):
    features = seed.customer_features()
    assert list(features) == ["CUST001", "CUST002", "CUST003", "CUST004", "CUST005"]
    assert all(isinstance(f, CustomerFeatures) for f in features.values())
    assert features["CUST002"].contract_days == 15


def test_each_call_returns_fresh_objects(seed):
    first = seed.market_states()
    first["premium-plan"].demand = 2.0
    assert seed.market_states()["premium-plan"].demand == 0.85
    assert seed.customer_features()["CUST001"] is not seed.customer_features()["CUST001"]
