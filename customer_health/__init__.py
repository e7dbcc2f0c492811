"""Customer health scoring engine."""

from .exception import CalculationError, CustomException, HealthScoreError, InvalidInputError
from .factors import (
    calculate_contract_score,
    calculate_engagement_score,
    calculate_payment_score,
    calculate_support_score,
)
from .health_score import (
    FACTOR_WEIGHTS,
    RISK_CRITICAL,
    RISK_HEALTHY,
    RISK_LEVEL_BOUNDS,
    RISK_WARNING,
    calculate_health_score,
    classify_risk_level,
)
from .schemas import (
    ContractInfo,
    CustomerHealthData,
    EngagementMetrics,
    FactorScore,
    HealthScoreResult,
    PaymentHistory,
    SupportData,
)

__all__ = [
    "CalculationError",
    "ContractInfo",
    "CustomException",
    "CustomerHealthData",
    "EngagementMetrics",
    "FACTOR_WEIGHTS",
    "FactorScore",
    "HealthScoreError",
    "HealthScoreResult",
    "InvalidInputError",
    "PaymentHistory",
    "RISK_CRITICAL",
    "RISK_HEALTHY",
    "RISK_LEVEL_BOUNDS",
    "RISK_WARNING",
    "SupportData",
    "calculate_contract_score",
    "calculate_engagement_score",
    "calculate_health_score",
    "calculate_payment_score",
    "calculate_support_score",
    "classify_risk_level",
]
