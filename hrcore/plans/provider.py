"""
hrcore Plans - Provider Protocol and In-Memory Provider
=======================================================
"""

from __future__ import annotations

import uuid
from typing import Mapping, Protocol

from hrcore.plans.models import PlanFeatures


class PlanProvider(Protocol):
    def get_plan_features(self, company_id: uuid.UUID) -> PlanFeatures | None:
        ...


class InMemoryPlanProvider:
    """
    Deterministic in-memory provider used by tests/bootstrap.
    """

    def __init__(
        self,
        features_by_company: Mapping[uuid.UUID, PlanFeatures] | None = None,
    ):
        self._features: dict[uuid.UUID, PlanFeatures] = {}
        for company_id, features in (features_by_company or {}).items():
            self.assign(company_id, features)

    def assign(self, company_id: uuid.UUID, features: PlanFeatures) -> None:
        if not isinstance(company_id, uuid.UUID):
            raise ValueError("company_id must be UUID.")
        self._features[company_id] = features

    def get_plan_features(self, company_id: uuid.UUID) -> PlanFeatures | None:
        return self._features.get(company_id)
