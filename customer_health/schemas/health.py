from __future__ import annotations

from dataclasses import MISSING, dataclass, fields
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Mapping

from customer_health.exception import InvalidInputError
from customer_health.validation import require_value


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _lookup(source: Mapping[str, Any], field_name: str) -> Any:
    for key in (field_name, _camel_case(field_name)):
        if key in source and source[key] is not None:
            return source[key]
    return None


def _require_mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    require_value(value, field_name)
    if not isinstance(value, Mapping):
        raise InvalidInputError(field_name, "must be an object")
    return value


def _record_from_mapping(cls, source: Any):
    source = _require_mapping(source, cls.record_name)
    values = {}
    for record_field in fields(cls):
        value = _lookup(source, record_field.name)
        if record_field.default is MISSING:
            require_value(value, record_field.name)
        values[record_field.name] = value
    return cls(**values)


@dataclass(frozen=True, slots=True)
class PaymentHistory:
    record_name: ClassVar[str] = "payment"

    days_since_last_payment: float
    average_payment_delay: float
    overdue_amount: float
    payment_consistency: float | None = None

    @classmethod
    def from_mapping(cls, source: Mapping[str, Any]) -> PaymentHistory:
        return _record_from_mapping(cls, source)


@dataclass(frozen=True, slots=True)
class EngagementMetrics:
    record_name: ClassVar[str] = "engagement"

    logins_per_month: float
    feature_usage_count: float
    support_tickets_opened: float
    active_user_count: float | None = None

    @classmethod
    def from_mapping(cls, source: Mapping[str, Any]) -> EngagementMetrics:
        return _record_from_mapping(cls, source)


@dataclass(frozen=True, slots=True)
class ContractInfo:
    record_name: ClassVar[str] = "contract"

    days_until_renewal: float
    contract_value: float
    has_recent_upgrades: bool
    auto_renewal_enabled: bool | None = None

    @classmethod
    def from_mapping(cls, source: Mapping[str, Any]) -> ContractInfo:
        return _record_from_mapping(cls, source)


@dataclass(frozen=True, slots=True)
class SupportData:
    record_name: ClassVar[str] = "support"

    average_resolution_time_hours: float
    satisfaction_score: float
    escalation_count: float
    open_ticket_count: float

    @classmethod
    def from_mapping(cls, source: Mapping[str, Any]) -> SupportData:
        return _record_from_mapping(cls, source)


@dataclass(frozen=True, slots=True)
class CustomerHealthData:
    record_name: ClassVar[str] = "customer_data"

    payment: PaymentHistory
    engagement: EngagementMetrics
    contract: ContractInfo
    support: SupportData
    customer_id: Any = None

    @classmethod
    def from_mapping(cls, source: Mapping[str, Any]) -> CustomerHealthData:
        source = _require_mapping(source, cls.record_name)
        return cls(
            payment=PaymentHistory.from_mapping(source.get("payment")),
            engagement=EngagementMetrics.from_mapping(source.get("engagement")),
            contract=ContractInfo.from_mapping(source.get("contract")),
            support=SupportData.from_mapping(source.get("support")),
            customer_id=_lookup(source, "customer_id"),
        )


@dataclass(frozen=True, slots=True)
class FactorScore:
    score: int
    weight: Decimal
    weighted_score: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "weight": float(self.weight),
            "weighted_score": float(self.weighted_score),
        }


@dataclass(frozen=True, slots=True)
class HealthScoreResult:
    overall_score: int
    risk_level: str
    breakdown: dict[str, FactorScore]
    calculated_at: datetime
    customer_id: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "customer_id": self.customer_id,
            "overall_score": self.overall_score,
            "risk_level": self.risk_level,
            "breakdown": {name: factor.to_dict() for name, factor in self.breakdown.items()},
            "calculated_at": self.calculated_at.isoformat(),
        }


__all__ = [
    "ContractInfo",
    "CustomerHealthData",
    "EngagementMetrics",
    "FactorScore",
    "HealthScoreResult",
    "PaymentHistory",
    "SupportData",
]
