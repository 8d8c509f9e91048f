"""
Module: connectors.seed_data

Provides the fixed in-memory seed tables the simulation models start from.
Every accessor returns fresh copies so model instances never share state.
"""

from models.customer import CustomerFeatures
from models.pricing import MarketState


class SeedData:
    """
    Seed connector for market conditions, demand history and customer features.
    """

    _market_data = {
        "premium-plan": {
            "base_price": 99,
            "demand": 0.85,
            "competition": 0.72,
            "seasonality": 1.08,
            "elasticity": -0.8,
        },
        "basic-plan": {
            "base_price": 29,
            "demand": 1.15,
            "competition": 0.95,
            "seasonality": 0.93,
            "elasticity": -1.2,
        },
        "enterprise-plan": {
            "base_price": 299,
            "demand": 0.78,
            "competition": 0.65,
            "seasonality": 1.12,
            "elasticity": -0.6,
        },
    }
    _historical_demand = {
        "Premium Plan": [1100, 1150, 1200, 1180, 1220, 1250, 1280, 1320, 1350, 1380, 1400, 1420],
        "Basic Plan": [3200, 3250, 3300, 3280, 3320, 3400, 3450, 3500, 3520, 3580, 3600, 3650],
        "Enterprise Plan": [150, 155, 160, 165, 170, 180, 185, 190, 195, 200, 205, 210],
        "Starter Plan": [2200, 2150, 2100, 2080, 2050, 2100, 2080, 2000, 1980, 1960, 1950, 1940],
    }
    _customer_features = {
        "CUST001": {"usage": 0.3, "support_tickets": 5, "contract_days": 30, "engagement": 0.2},
        "CUST002": {"usage": 0.1, "support_tickets": 2, "contract_days": 15, "engagement": 0.1},
        "CUST003": {"usage": 0.6, "support_tickets": 3, "contract_days": 45, "engagement": 0.4},
        "CUST004": {"usage": 0.8, "support_tickets": 1, "contract_days": 120, "engagement": 0.7},
        "CUST005": {"usage": 0.9, "support_tickets": 0, "contract_days": 200, "engagement": 0.9},
    }

    def market_states(self) -> dict[str, MarketState]:
        """Market state per product id."""
        return {pid: MarketState(**data) for pid, data in self._market_data.items()}

    def historical_demand(self) -> dict[str, tuple[float, ...]]:
        """Historical demand series per product name (immutable)."""
        return {name: tuple(series) for name, series in self._historical_demand.items()}

    def customer_features(self) -> dict[str, CustomerFeatures]:
        """Feature vector per customer id."""
        return {
            cid: CustomerFeatures(**data) for cid, data in self._customer_features.items()
        }
