"""
Weighted churn risk scoring over per-customer feature vectors.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from config.config import ChurnModelConfig
from connectors.seed_data import SeedData
from models.customer import ChurnRisk, CustomerFeatures
from models.errors import NotFoundError
from utils.merge import merge_fields
from utils.numeric import clamp, round_half_up

logger = logging.getLogger(__name__)


class ChurnModel:
    def __init__(
        self,
        config: ChurnModelConfig | None = None,
        customer_features: Mapping[str, CustomerFeatures] | None = None,
    ):
        self.config = config or ChurnModelConfig()
        self.customer_features: dict[str, CustomerFeatures] = (
            dict(customer_features)
            if customer_features is not None
            else SeedData().customer_features()
        )

    def customers(self) -> list[str]:
        return list(self.customer_features)

    def get_features(self, customer_id: str) -> CustomerFeatures:
        return self._get(customer_id).model_copy()

    def predict_churn_risk(self, customer_id: str) -> ChurnRisk:
        """
        Score one customer.

        Raises:
            NotFoundError: if the customer has no feature vector.
        """
        features = self._get(customer_id)
        cfg = self.config

        usage_score = (1 - features.usage) * cfg.usage_weight
        support_score = min(features.support_tickets / cfg.ticket_saturation, 1) * cfg.support_weight
        contract_score = (
            max(0, (cfg.contract_horizon_days - features.contract_days) / cfg.contract_horizon_days)
            * cfg.contract_weight
        )
        engagement_score = (1 - features.engagement) * cfg.engagement_weight

        risk_score = int(
            clamp(
                round_half_up((usage_score + support_score + contract_score + engagement_score) * 100),
                0,
                100,
            )
        )

        factors = []
        if features.usage < cfg.low_usage_threshold:
            factors.append("low platform usage")
        if features.support_tickets > cfg.high_ticket_threshold:
            factors.append("high support ticket volume")
        if features.contract_days < cfg.contract_horizon_days:
            factors.append("contract expiring soon")
        if features.engagement < cfg.low_engagement_threshold:
            factors.append("low engagement score")

        actions = []
        if risk_score > cfg.outreach_risk_threshold:
            actions.append("immediate personal outreach")
            actions.append("offer retention discount")
        if features.usage < cfg.training_usage_threshold:
            actions.append("schedule product training")
        if features.support_tickets > cfg.escalation_ticket_threshold:
            actions.append("escalate to success manager")

        retention = max(cfg.retention_floor, cfg.retention_ceiling - risk_score)
        logger.info(f"Churn {customer_id}: risk={risk_score}, retention={retention}%")
        return ChurnRisk(
            customer_id=customer_id,
            risk_score=risk_score,
            factors=factors,
            recommended_actions=actions,
            retention_probability=retention,
        )

    def batch_predict(self, customer_ids: Iterable[str]) -> list[ChurnRisk]:
        """Score each id in order; the first unknown id aborts the whole batch."""
        return [self.predict_churn_risk(cid) for cid in customer_ids]

    def high_risk_customers(self, threshold: int | None = None) -> list[ChurnRisk]:
        """Risks strictly above ``threshold``, highest first."""
        limit = self.config.outreach_risk_threshold if threshold is None else threshold
        risks = [r for r in self.batch_predict(self.customer_features) if r.risk_score > limit]
        return sorted(risks, key=lambda r: r.risk_score, reverse=True)

    def update_customer_features(
        self, customer_id: str, features: Mapping[str, Any]
    ) -> CustomerFeatures | None:
        """
        Shallow-merge ``features`` into the customer's vector.

        Unknown ids raise NotFoundError when ``strict_updates`` is set,
        otherwise the call is ignored and returns None.
        """
        if customer_id not in self.customer_features:
            if self.config.strict_updates:
                raise NotFoundError("Customer", customer_id)
            logger.info(f"Ignoring feature update for unknown customer {customer_id}")
            return None
        merged = merge_fields(self.customer_features[customer_id], features, label=customer_id)
        self.customer_features[customer_id] = merged
        return merged.model_copy()

    def _get(self, customer_id: str) -> CustomerFeatures:
        try:
            return self.customer_features[customer_id]
        except KeyError:
            raise NotFoundError("Customer", customer_id) from None
