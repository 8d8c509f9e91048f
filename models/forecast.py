"""
Demand forecast data models.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SeasonalFactor:
    factor: str
    impact: float


@dataclass
class ForecastResult:
    """
    Data model for a demand forecast. ``historical`` holds at most the
    trailing window of the stored series; ``confidence`` applies to the
    whole predicted horizon.
    """

    product: str
    historical: list[float] = field(default_factory=list)
    predicted: list[int] = field(default_factory=list)
    confidence: float = 0.0
    seasonal_factors: list[SeasonalFactor] = field(default_factory=list)
    trend: float = 0.0
    seasonal_indices: list[float] = field(default_factory=list)
