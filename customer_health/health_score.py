"""Overall customer health score and risk classification.

Factor weights (sum to exactly 1):
- payment 40%, engagement 30%, contract 20%, support 10%

Risk levels, inclusive bands:
- critical: 0-30
- warning: 31-70
- healthy: 71-100
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping

from customer_health.exception import CalculationError, InvalidInputError
from customer_health.factors import (
    calculate_contract_score,
    calculate_engagement_score,
    calculate_payment_score,
    calculate_support_score,
)
from customer_health.logger import logging
from customer_health.schemas import CustomerHealthData, FactorScore, HealthScoreResult
from customer_health.validation import require_value

FACTOR_PAYMENT = "payment"
FACTOR_ENGAGEMENT = "engagement"
FACTOR_CONTRACT = "contract"
FACTOR_SUPPORT = "support"

FACTOR_WEIGHTS = {
    FACTOR_PAYMENT: Decimal("0.40"),
    FACTOR_ENGAGEMENT: Decimal("0.30"),
    FACTOR_CONTRACT: Decimal("0.20"),
    FACTOR_SUPPORT: Decimal("0.10"),
}

RISK_HEALTHY = "healthy"
RISK_WARNING = "warning"
RISK_CRITICAL = "critical"

CRITICAL_MAX_SCORE = 30
WARNING_MAX_SCORE = 70

RISK_LEVEL_BOUNDS = {
    RISK_CRITICAL: (0, CRITICAL_MAX_SCORE),
    RISK_WARNING: (CRITICAL_MAX_SCORE + 1, WARNING_MAX_SCORE),
    RISK_HEALTHY: (WARNING_MAX_SCORE + 1, 100),
}


def classify_risk_level(overall_score: int) -> str:
    """Map an overall score to its risk level.

    - score <= 30 -> critical
    - 31 <= score <= 70 -> warning
    - score >= 71 -> healthy
    """
    if overall_score <= CRITICAL_MAX_SCORE:
        return RISK_CRITICAL
    if overall_score <= WARNING_MAX_SCORE:
        return RISK_WARNING
    return RISK_HEALTHY


def _timestamp_now() -> datetime:
    return datetime.now(timezone.utc)


def _factor_score(name: str, score: int) -> FactorScore:
    weight = FACTOR_WEIGHTS[name]
    return FactorScore(score=score, weight=weight, weighted_score=Decimal(score) * weight)


def _overall_score(breakdown: Mapping[str, FactorScore]) -> int:
    total = sum((factor.weighted_score for factor in breakdown.values()), Decimal(0))
    return int(total.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def calculate_health_score(customer_data: CustomerHealthData | Mapping[str, Any]) -> HealthScoreResult:
    """Combine the four factor scores into one result.

    Raises ``InvalidInputError`` for bad input and wraps anything else in
    ``CalculationError``; no partial result is ever returned.
    """
    require_value(customer_data, CustomerHealthData.record_name)

    try:
        if isinstance(customer_data, Mapping):
            customer_data = CustomerHealthData.from_mapping(customer_data)
        elif not isinstance(customer_data, CustomerHealthData):
            raise InvalidInputError(
                CustomerHealthData.record_name, "must be a CustomerHealthData or a mapping"
            )

        require_value(customer_data.payment, "customer_data.payment")
        require_value(customer_data.engagement, "customer_data.engagement")
        require_value(customer_data.contract, "customer_data.contract")
        require_value(customer_data.support, "customer_data.support")

        breakdown = {
            FACTOR_PAYMENT: _factor_score(FACTOR_PAYMENT, calculate_payment_score(customer_data.payment)),
            FACTOR_ENGAGEMENT: _factor_score(FACTOR_ENGAGEMENT, calculate_engagement_score(customer_data.engagement)),
            FACTOR_CONTRACT: _factor_score(FACTOR_CONTRACT, calculate_contract_score(customer_data.contract)),
            FACTOR_SUPPORT: _factor_score(FACTOR_SUPPORT, calculate_support_score(customer_data.support)),
        }

        overall_score = _overall_score(breakdown)
        risk_level = classify_risk_level(overall_score)
        result = HealthScoreResult(
            overall_score=overall_score,
            risk_level=risk_level,
            breakdown=breakdown,
            calculated_at=_timestamp_now(),
            customer_id=customer_data.customer_id,
        )
    except InvalidInputError:
        raise
    except Exception as e:
        logging.error(f"Health score calculation failed: {e}")
        raise CalculationError(e, sys) from e

    logging.info(
        f"Health score for customer {result.customer_id}: {overall_score} ({risk_level})"
    )
    return result


__all__ = [
    "FACTOR_CONTRACT",
    "FACTOR_ENGAGEMENT",
    "FACTOR_PAYMENT",
    "FACTOR_SUPPORT",
    "FACTOR_WEIGHTS",
    "RISK_CRITICAL",
    "RISK_HEALTHY",
    "RISK_LEVEL_BOUNDS",
    "RISK_WARNING",
    "calculate_health_score",
    "classify_risk_level",
]
