"""
Customer feature vector and churn risk models.
"""

from dataclasses import dataclass, field

from pydantic import BaseModel, Field


class CustomerFeatures(BaseModel):
    """
    Behavioural features used for churn scoring.
    """

    usage: float = Field(ge=0, le=1)
    support_tickets: int = Field(ge=0)
    contract_days: float  # days remaining, negative once lapsed
    engagement: float = Field(ge=0, le=1)


@dataclass
class ChurnRisk:
    """
    Data model for a customer's churn risk.
    """

    customer_id: str
    risk_score: int
    factors: list[str] = field(default_factory=list)
    recommended_actions: list[str] = field(default_factory=list)
    retention_probability: int = 0
