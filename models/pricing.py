"""
Pricing-related data models.
Includes the per-product MarketState and the derived PricingRecommendation.
"""

from pydantic import BaseModel, Field


class MarketState(BaseModel):
    """
    Tunable market factors for one product. Demand and seasonality are
    multipliers centred on 1.0; competition is a 0..1 intensity.
    """

    base_price: float = Field(gt=0)
    demand: float = Field(ge=0)
    competition: float = Field(ge=0)
    seasonality: float = Field(ge=0)
    elasticity: float = 0.0


class PricingRecommendation(BaseModel):
    """Price recommendation derived from the current MarketState."""

    product_id: str
    current_price: float
    recommended_price: float
    confidence: float = Field(ge=0, le=100)
    expected_impact: float  # currency per month, signed
    factors: list[str] = Field(default_factory=list)

    @property
    def price_change_pct(self) -> float:
        return (self.recommended_price - self.current_price) / self.current_price * 100
