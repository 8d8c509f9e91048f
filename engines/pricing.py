"""
Heuristic price optimisation over per-product market conditions.
"""

import logging
import random
from collections.abc import Mapping
from typing import Any

from config.config import PricingModelConfig
from connectors.seed_data import SeedData
from models.errors import NotFoundError
from models.pricing import MarketState, PricingRecommendation
from utils.merge import merge_fields
from utils.numeric import clamp, round_half_up

logger = logging.getLogger(__name__)


class PricingModel:
    """
    Holds a MarketState per product and derives price recommendations from it.
    Recommendations are recomputed on every call; nothing is cached.
    """

    def __init__(
        self,
        config: PricingModelConfig | None = None,
        market_data: Mapping[str, MarketState] | None = None,
        rng: random.Random | None = None,
    ):
        self.config = config or PricingModelConfig()
        self.market_data: dict[str, MarketState] = (
            dict(market_data) if market_data is not None else SeedData().market_states()
        )
        self.rng = rng or random.Random()
        logger.info(f"Pricing model init with {len(self.market_data)} products")

    def products(self) -> list[str]:
        return list(self.market_data)

    def get_market_state(self, product_id: str) -> MarketState:
        return self._get(product_id).model_copy()

    def calculate_optimal_price(self, product_id: str) -> PricingRecommendation:
        """
        Recommend a price for ``product_id``.

        Raises:
            NotFoundError: if the product has no market state.
        """
        state = self._get(product_id)
        cfg = self.config

        adjustment = (
            (state.demand - 1) * cfg.demand_weight
            + (1 - state.competition) * cfg.competition_weight
            + (state.seasonality - 1) * cfg.seasonality_weight
        )
        recommended_price = round_half_up(state.base_price * (1 + adjustment))
        confidence = clamp(
            min(cfg.max_confidence, cfg.base_confidence + abs(adjustment) * 100), 0, 100
        )
        expected_impact = (recommended_price - state.base_price) * cfg.monthly_volume

        factors = []
        if state.demand > cfg.high_demand_threshold:
            factors.append("high demand detected")
        if state.competition < cfg.limited_competition_threshold:
            factors.append("limited competition")
        if state.seasonality > cfg.seasonal_uptrend_threshold:
            factors.append("seasonal uptrend")
        if state.demand < cfg.soft_demand_threshold:
            factors.append("demand softening")
        if state.competition > cfg.competitive_pressure_threshold:
            factors.append("competitive pressure")

        logger.info(
            f"Price {product_id}: ${state.base_price:.2f} -> ${recommended_price:.2f} "
            f"(Adj={adjustment:+.4f}, Conf={confidence:.2f})"
        )
        return PricingRecommendation(
            product_id=product_id,
            current_price=state.base_price,
            recommended_price=recommended_price,
            confidence=confidence,
            expected_impact=expected_impact,
            factors=factors,
        )

    def recommend_all(self) -> dict[str, PricingRecommendation]:
        return {pid: self.calculate_optimal_price(pid) for pid in self.market_data}

    def update_market_conditions(
        self, product_id: str, conditions: Mapping[str, Any]
    ) -> MarketState | None:
        """
        Shallow-merge ``conditions`` into the product's market state.

        Unknown ids raise NotFoundError when ``strict_updates`` is set,
        otherwise the call is ignored and returns None.
        """
        if product_id not in self.market_data:
            if self.config.strict_updates:
                raise NotFoundError("Product", product_id)
            logger.info(f"Ignoring market update for unknown product {product_id}")
            return None
        merged = merge_fields(self.market_data[product_id], conditions, label=product_id)
        self.market_data[product_id] = merged
        logger.debug(f"Market state for {product_id} updated: {merged}")
        return merged.model_copy()

    def simulate_market_shift(self, product_id: str) -> PricingRecommendation:
        """Draw fresh demand/competition/seasonality and re-price the product."""
        self._get(product_id)
        shift = {
            "demand": 0.8 + self.rng.random() * 0.4,
            "competition": 0.6 + self.rng.random() * 0.4,
            "seasonality": 0.9 + self.rng.random() * 0.2,
        }
        self.update_market_conditions(product_id, shift)
        return self.calculate_optimal_price(product_id)

    def _get(self, product_id: str) -> MarketState:
        try:
            return self.market_data[product_id]
        except KeyError:
            raise NotFoundError("Product", product_id) from None
