"""
Synthetic tick data for the dashboard metric streams.

Each generator draws from an injected ``random.Random`` so a seeded source
reproduces the exact same sequence of samples.
"""

import math
import random
from collections.abc import Callable, Sequence
from typing import Any

from models.enums import MetricStream
from models.metrics import ChartPoint, MetricSample, PricingPerformance
from utils.numeric import ols_slope, round_half_up, round_to


class MetricDataGenerator:
    """Produces one payload per stream on every call."""

    BASE_REVENUE = 12_400_000
    BASE_CUSTOMERS = 48_392
    BASE_CHURN_RATE = 3.2
    BASE_AI_ACCURACY = 94.7
    DEMAND_BASELINES = {
        "Premium Plan": 1420,
        "Basic Plan": 3650,
        "Enterprise Plan": 210,
        "Starter Plan": 1950,
    }

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def generators(self) -> dict[MetricStream, Callable[[], Any]]:
        """Map every stream to its payload generator."""
        return {
            MetricStream.REVENUE: self.revenue,
            MetricStream.CUSTOMERS: self.customers,
            MetricStream.CHURN_RATE: self.churn_rate,
            MetricStream.AI_ACCURACY: self.ai_accuracy,
            MetricStream.DEMAND_TREND: self.demand_trend,
            MetricStream.PRICING_PERFORMANCE: self.pricing_performance,
        }

    def _centered(self) -> float:
        """Uniform draw in [-0.5, 0.5)."""
        return self.rng.random() - 0.5

    def revenue(self) -> MetricSample:
        variation = self._centered() * 0.02
        change = (self.rng.random() - 0.3) * 0.3  # slight positive bias
        return MetricSample(
            value=round_half_up(self.BASE_REVENUE * (1 + variation)),
            change=round_to(change, 3),
        )

    def customers(self) -> MetricSample:
        variation = self._centered() * 0.01
        change = (self.rng.random() - 0.2) * 0.15
        return MetricSample(
            value=round_half_up(self.BASE_CUSTOMERS * (1 + variation)),
            change=round_to(change, 3),
        )

    def churn_rate(self) -> MetricSample:
        value = max(0.0, self.BASE_CHURN_RATE + self._centered() * 0.1)
        change = (self.rng.random() - 0.6) * 0.2  # negative bias
        return MetricSample(value=round_to(value, 1), change=round_to(change, 1))

    def ai_accuracy(self) -> MetricSample:
        value = min(99.9, max(85.0, self.BASE_AI_ACCURACY + self._centered() * 0.5))
        change = (self.rng.random() - 0.3) * 0.05
        return MetricSample(value=round_to(value, 1), change=round_to(change, 1))

    def demand_trend(self) -> list[ChartPoint]:
        points = []
        for product, baseline in self.DEMAND_BASELINES.items():
            value = round_half_up(baseline * (1 + self._centered() * 0.1))
            predicted = round_half_up(value * (1 + (self.rng.random() - 0.3) * 0.2))
            points.append(
                ChartPoint(
                    name=product,
                    value=value,
                    predicted=predicted,
                    confidence=round_half_up(85 + self.rng.random() * 10),
                )
            )
        return points

    def pricing_performance(self) -> PricingPerformance:
        return PricingPerformance(
            revenue=round_to(20 + self.rng.random() * 10, 1),
            conversion=round_to(85 + self.rng.random() * 10, 1),
            optimization=round_to(10 + self.rng.random() * 15, 1),
        )

    # --- Chart series (not streamed) ---

    def generate_historical_data(self, periods: int = 12) -> list[ChartPoint]:
        """Monthly series with upward trend, one sinusoidal season and noise."""
        base_value = 1_000_000
        data = []
        for i in range(periods):
            trend = i * 50_000
            seasonal = math.sin((i / periods) * 2 * math.pi) * 100_000
            noise = self._centered() * 50_000
            data.append(
                ChartPoint(
                    name=f"Month {i + 1}",
                    value=round_half_up(base_value + trend + seasonal + noise),
                )
            )
        return data

    def generate_forecast_data(
        self, historical: Sequence[ChartPoint], periods: int = 6
    ) -> list[ChartPoint]:
        """Extend ``historical`` by its linear trend with decreasing confidence."""
        if not historical:
            return []
        last_value = historical[-1].value
        trend = ols_slope([point.value for point in historical])
        forecast = []
        for i in range(1, periods + 1):
            trend_value = last_value + trend * i
            variation = self._centered() * 0.1 * trend_value
            forecast.append(
                ChartPoint(
                    name=f"Forecast {i}",
                    value=round_half_up(trend_value + variation),
                    confidence=max(70, 95 - i * 3),
                )
            )
        return forecast
