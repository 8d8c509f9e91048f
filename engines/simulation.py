"""
Composition root wiring one metric registry and the three models together.
"""

import logging
import random

from config.config import SimulationConfig
from engines.churn import ChurnModel
from engines.forecasting import ForecastModel
from engines.pricing import PricingModel
from utils.data_generation import MetricDataGenerator
from utils.metric_streams import MetricStreamRegistry

logger = logging.getLogger(__name__)


class DashboardSimulation:
    """
    An isolated simulation: its own registry, its own state tables and one
    shared random source. Pass a seeded ``rng`` (or set
    ``config.streams.random_seed``) for reproducible runs.
    """

    def __init__(self, config: SimulationConfig | None = None, rng: random.Random | None = None):
        self.config = config or SimulationConfig()
        self.rng = rng or random.Random(self.config.streams.random_seed)
        self.data_generator = MetricDataGenerator(self.rng)
        self.registry = MetricStreamRegistry(
            self.data_generator.generators(),
            tick_interval=self.config.streams.tick_interval,
        )
        self.pricing = PricingModel(self.config.pricing, rng=self.rng)
        self.forecasting = ForecastModel(self.config.forecasting, rng=self.rng)
        self.churn = ChurnModel(self.config.churn)
        logger.info(
            f"Dashboard simulation ready (tick={self.config.streams.tick_interval}s, "
            f"seed={self.config.streams.random_seed})"
        )

    async def close(self) -> None:
        await self.registry.close()
