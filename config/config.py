"""
Configuration classes for the dashboard simulation core.
Defines tick scheduling and model heuristics in a type-safe, extensible way.
"""

import os
from dataclasses import dataclass, field


@dataclass
class MetricStreamConfig:
    tick_interval: float = 5.0  # seconds between scheduled ticks
    random_seed: int | None = None  # None = real entropy

    @classmethod
    def from_env(cls) -> "MetricStreamConfig":
        """Build from DASHBOARD_TICK_INTERVAL / DASHBOARD_RANDOM_SEED."""
        interval = os.getenv("DASHBOARD_TICK_INTERVAL")
        seed = os.getenv("DASHBOARD_RANDOM_SEED")
        return cls(
            tick_interval=float(interval) if interval else cls.tick_interval,
            random_seed=int(seed) if seed else None,
        )


@dataclass
class PricingModelConfig:
    demand_weight: float = 0.15
    competition_weight: float = 0.10
    seasonality_weight: float = 0.12
    base_confidence: float = 75.0
    max_confidence: float = 95.0
    monthly_volume: int = 450  # units/month used to size expected impact
    high_demand_threshold: float = 1.05
    soft_demand_threshold: float = 0.95
    limited_competition_threshold: float = 0.8
    competitive_pressure_threshold: float = 0.9
    seasonal_uptrend_threshold: float = 1.05
    strict_updates: bool = True


@dataclass
class ForecastModelConfig:
    default_periods: int = 6
    season_length: int = 4
    noise_amplitude: float = 0.05  # total width, i.e. +/-2.5%
    history_window: int = 12
    max_confidence: float = 95.0
    min_confidence: float = 75.0
    confidence_decay: float = 2.0  # confidence points lost per period


@dataclass
class ChurnModelConfig:
    usage_weight: float = 0.30
    support_weight: float = 0.25
    contract_weight: float = 0.25
    engagement_weight: float = 0.20
    ticket_saturation: int = 10
    contract_horizon_days: int = 60
    low_usage_threshold: float = 0.5
    high_ticket_threshold: int = 3
    low_engagement_threshold: float = 0.4
    outreach_risk_threshold: int = 70
    training_usage_threshold: float = 0.3
    escalation_ticket_threshold: int = 2
    retention_ceiling: int = 90
    retention_floor: int = 10
    strict_updates: bool = True


@dataclass
class SimulationConfig:
    streams: MetricStreamConfig = field(default_factory=MetricStreamConfig)
    pricing: PricingModelConfig = field(default_factory=PricingModelConfig)
    forecasting: ForecastModelConfig = field(default_factory=ForecastModelConfig)
    churn: ChurnModelConfig = field(default_factory=ChurnModelConfig)


# Example usage:
# config = SimulationConfig(streams=MetricStreamConfig(tick_interval=1.0, random_seed=7))
# sim = DashboardSimulation(config)
