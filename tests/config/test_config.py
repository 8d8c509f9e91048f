from config.config import (
    ChurnModelConfig,
    ForecastModelConfig,
    MetricStreamConfig,
    PricingModelConfig,
    SimulationConfig,
)


def test_metric_stream_config_defaults():
    config = MetricStreamConfig()
    assert config.tick_interval == 5.0
    assert config.random_seed is None


def test_metric_stream_config_from_env(monkeypatch):
    monkeypatch.setenv("DASHBOARD_TICK_INTERVAL", "0.25")
    monkeypatch.setenv("DASHBOARD_RANDOM_SEED", "42")
    config = MetricStreamConfig.from_env()
    assert config.tick_interval == 0.25
    assert config.random_seed == 42


def test_metric_stream_config_from_env_defaults(monkeypatch):
    monkeypatch.delenv("DASHBOARD_TICK_INTERVAL", raising=False)
    monkeypatch.delenv("DASHBOARD_RANDOM_SEED", raising=False)
    config = MetricStreamConfig.from_env()
    assert config.tick_interval == 5.0
    assert config.random_seed is None


def test_pricing_model_config_defaults():
    config = PricingModelConfig()
    assert (config.demand_weight, config.competition_weight, config.seasonality_weight) == (
        0.15,
        0.10,
        0.12,
    )
    assert config.base_confidence == 75.0
    assert config.max_confidence == 95.0
    assert config.monthly_volume == 450
    assert config.strict_updates is True


def test_forecast_model_config_defaults():
    config = ForecastModelConfig()
    assert config.default_periods == 6
    assert config.season_length == 4
    assert config.noise_amplitude == 0.05
    assert config.history_window == 12


def test_churn_model_config_weights_sum_to_one():
    config = ChurnModelConfig()
    total = config.usage_weight + config.support_weight + config.contract_weight + config.engagement_weight
    assert abs(total - 1.0) < 1e-9
    assert config.retention_ceiling == 90
    assert config.retention_floor == 10


def test_simulation_config_default_factory():
    """Each SimulationConfig gets its own nested config objects."""
    config1 = SimulationConfig()
    config2 = SimulationConfig()
    assert config1.pricing == config2.pricing
    assert config1.pricing is not config2.pricing
    config1.streams.tick_interval = 1.0
    assert config2.streams.tick_interval == 5.0
