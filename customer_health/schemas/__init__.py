from .health import (
    ContractInfo,
    CustomerHealthData,
    EngagementMetrics,
    FactorScore,
    HealthScoreResult,
    PaymentHistory,
    SupportData,
)

__all__ = [
    "ContractInfo",
    "CustomerHealthData",
    "EngagementMetrics",
    "FactorScore",
    "HealthScoreResult",
    "PaymentHistory",
    "SupportData",
]
