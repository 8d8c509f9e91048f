"""
Trend + seasonal demand forecasting over fixed historical series.
"""

import logging
import random
from collections.abc import Mapping, Sequence

import numpy as np

from config.config import ForecastModelConfig
from connectors.seed_data import SeedData
from models.forecast import ForecastResult, SeasonalFactor
from utils.numeric import ols_slope, round_half_up

logger = logging.getLogger(__name__)


class ForecastModel:
    """
    Projects each series forward from its last value along the OLS trend,
    scaled by a per-phase seasonal index and a small uniform noise term.
    """

    SEASONAL_FACTORS = (
        SeasonalFactor("Holiday Season", 0.25),
        SeasonalFactor("Back-to-School", 0.18),
        SeasonalFactor("Summer Slowdown", -0.15),
        SeasonalFactor("Year-End Budget", 0.30),
    )

    def __init__(
        self,
        config: ForecastModelConfig | None = None,
        historical_data: Mapping[str, Sequence[float]] | None = None,
        rng: random.Random | None = None,
    ):
        self.config = config or ForecastModelConfig()
        if historical_data is None:
            self.historical_data = SeedData().historical_demand()
        else:
            self.historical_data = {k: tuple(v) for k, v in historical_data.items()}
        self.rng = rng or random.Random()

    def products(self) -> list[str]:
        return list(self.historical_data)

    def generate_forecast(self, product: str, periods: int | None = None) -> ForecastResult:
        """
        Forecast ``periods`` future values for ``product``.

        A product without history is forecast from an empty series (all
        predictions 0) instead of raising.
        """
        cfg = self.config
        periods = cfg.default_periods if periods is None else periods
        if periods < 0:
            raise ValueError("periods must be non-negative.")

        history = self.historical_data.get(product)
        if history is None:
            logger.warning(f"No demand history for '{product}', forecasting from empty series")
            history = ()

        trend = ols_slope(history)
        seasonal_indices = self.seasonal_indices(history)
        last_value = history[-1] if history else 0.0

        predicted = []
        for i in range(1, periods + 1):
            noise = (self.rng.random() - 0.5) * cfg.noise_amplitude
            seasonal = seasonal_indices[i % cfg.season_length]
            predicted.append(round_half_up((last_value + trend * i) * seasonal * (1 + noise)))

        confidence = max(cfg.min_confidence, cfg.max_confidence - periods * cfg.confidence_decay)
        logger.info(
            f"Forecast {product}: {periods} periods, trend={trend:.2f}, confidence={confidence}"
        )
        return ForecastResult(
            product=product,
            historical=list(history[-cfg.history_window :]),
            predicted=predicted,
            confidence=confidence,
            seasonal_factors=list(self.SEASONAL_FACTORS),
            trend=trend,
            seasonal_indices=seasonal_indices,
        )

    def seasonal_indices(self, history: Sequence[float]) -> list[float]:
        """Mean of each phase divided by the overall mean (1.0 where undefined)."""
        season_length = self.config.season_length
        values = np.asarray(history, dtype=float)
        if values.size == 0 or values.mean() == 0:
            return [1.0] * season_length
        overall = values.mean()
        indices = []
        for phase in range(season_length):
            phase_values = values[phase::season_length]
            indices.append(float(phase_values.mean() / overall) if phase_values.size else 1.0)
        return indices
