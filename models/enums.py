"""
Centralized Enum definitions for the project.
"""

from enum import Enum


class MetricStream(str, Enum):
    """Named metric streams published by the registry"""

    REVENUE = "revenue"
    CUSTOMERS = "customers"
    CHURN_RATE = "churnRate"
    AI_ACCURACY = "aiAccuracy"
    DEMAND_TREND = "demandTrend"
    PRICING_PERFORMANCE = "pricingPerformance"
