"""
Demo script for the dashboard simulation core.

Subscribes a few console handlers to the metric streams, lets the timers
tick for a short while, then prints pricing, forecast and churn outputs the
way the dashboard pages would consume them.
"""

import asyncio

from config.config import MetricStreamConfig, SimulationConfig
from engines.simulation import DashboardSimulation
from models.enums import MetricStream
from models.metrics import ChartPoint, MetricSample
from utils import get_logger

logger = get_logger("dashboard_demo")


def log_revenue(sample: MetricSample):
    logger.info(f"Revenue: ${sample.value / 1_000_000:.1f}M ({sample.change:+.1%})")


def log_churn_rate(sample: MetricSample):
    logger.info(f"Churn rate: {sample.value}% ({sample.change:+}%)")


def log_demand(points: list[ChartPoint]):
    summary = ", ".join(f"{p.name}={p.value:.0f}->{p.predicted:.0f}" for p in points)
    logger.info(f"Demand trend: {summary}")


async def run_demo(ticks: int = 3, tick_interval: float = 0.5, seed: int | None = 42):
    config = SimulationConfig(
        streams=MetricStreamConfig(tick_interval=tick_interval, random_seed=seed)
    )
    sim = DashboardSimulation(config)
    try:
        sim.registry.subscribe(MetricStream.REVENUE, log_revenue)
        sim.registry.subscribe(MetricStream.CHURN_RATE, log_churn_rate)
        sim.registry.subscribe(MetricStream.DEMAND_TREND, log_demand)
        await asyncio.sleep(ticks * tick_interval + tick_interval / 2)

        logger.info("--- Pricing recommendations ---")
        for product_id, rec in sim.pricing.recommend_all().items():
            logger.info(
                f"{product_id}: ${rec.current_price:.0f} -> ${rec.recommended_price:.0f} "
                f"(confidence {rec.confidence:.1f}%, impact ${rec.expected_impact:+,.0f}/mo, "
                f"factors={rec.factors})"
            )

        logger.info("--- Demand forecasts ---")
        for product in sim.forecasting.products():
            forecast = sim.forecasting.generate_forecast(product)
            logger.info(f"{product}: {forecast.predicted} (confidence {forecast.confidence}%)")

        logger.info("--- Churn risk ---")
        for risk in sim.churn.batch_predict(sim.churn.customers()):
            logger.info(
                f"{risk.customer_id}: risk={risk.risk_score} "
                f"retention={risk.retention_probability}% actions={risk.recommended_actions}"
            )
    finally:
        await sim.close()


if __name__ == "__main__":
    asyncio.run(run_demo())
