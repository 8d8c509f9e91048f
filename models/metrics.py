"""
Payload models delivered by the metric streams.
"""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, Field


class MetricSample(BaseModel):
    """Scalar metric reading for one tick."""

    timestamp: datetime = Field(default_factory=datetime.now)
    value: float
    change: float  # relative change vs. previous period


@dataclass
class ChartPoint:
    """
    One labelled point of a chart series. ``predicted`` and ``confidence``
    are only set for forecast-style series.
    """

    name: str
    value: float
    predicted: float | None = None
    confidence: float | None = None


@dataclass
class PricingPerformance:
    revenue: float
    conversion: float
    optimization: float
