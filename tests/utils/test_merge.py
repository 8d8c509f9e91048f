import logging

import pytest
from pydantic import ValidationError

from models.customer import CustomerFeatures
from models.pricing import MarketState
from utils.merge import merge_fields


@pytest.fixture
def state() -> MarketState:
    return MarketState(base_price=99, demand=0.85, competition=0.72, seasonality=1.08, elasticity=-0.8)


def test_merge_overrides_only_supplied_fields(state):
    merged = merge_fields(state, {"demand": 1.2})
    assert merged.demand == 1.2
    assert merged.base_price == 99
    assert merged.seasonality == 1.08
    assert state.demand == 0.85  # original untouched


def test_merge_drops_unknown_fields(state, caplog):
    with caplog.at_level(logging.WARNING):
        merged = merge_fields(state, {"demand": 1.1, "volume": 500}, label="premium-plan")

    assert "volume" not in merged.model_dump()
    assert merged.demand == 1.1
    assert "Ignoring unknown fields for premium-plan: ['volume']" in caplog.text


def test_merge_revalidates_values():
    features = CustomerFeatures(usage=0.5, support_tickets=1, contract_days=90, engagement=0.5)
    with pytest.raises(ValidationError):
        merge_fields(features, {"usage": 1.5})
