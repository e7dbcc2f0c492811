from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping

from customer_health.exception import CalculationError, InvalidInputError
from customer_health.health_score import calculate_health_score
from customer_health.logger import logging
from customer_health.schemas import CustomerHealthData, HealthScoreResult

CONTRACT_VERSION = "v1"

STATUS_OK = "ok"
STATUS_INVALID_INPUT = "invalid_input"
STATUS_CALCULATION_FAILED = "calculation_failed"

_INVALID_INPUT_PREFIX = "Invalid data: "


def _timestamp_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True, slots=True)
class ScoreOutcome:
    """Tagged outcome of one scoring attempt.

    Exactly one shape per status:
    - ok: ``result`` is set
    - invalid_input: ``field`` and ``reason`` name the broken constraint
    - calculation_failed: ``message`` carries the wrapped cause
    """

    status: str
    result: HealthScoreResult | None = None
    field: str | None = None
    reason: str | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


def parse_customer_record(record: Mapping[str, Any]) -> CustomerHealthData:
    """Build the input record tree from a JSON-like object."""
    return CustomerHealthData.from_mapping(record)


def evaluate_customer(record: CustomerHealthData | Mapping[str, Any]) -> ScoreOutcome:
    """Score one customer and report the outcome instead of raising."""
    try:
        customer_data = record if isinstance(record, CustomerHealthData) else parse_customer_record(record)
        result = calculate_health_score(customer_data)
    except InvalidInputError as e:
        logging.info(f"Rejected health score input: {e}")
        return ScoreOutcome(
            status=STATUS_INVALID_INPUT,
            field=e.field,
            reason=e.reason,
            message=str(e),
        )
    except CalculationError as e:
        return ScoreOutcome(status=STATUS_CALCULATION_FAILED, message=str(e.cause))

    return ScoreOutcome(status=STATUS_OK, result=result)


def build_score_envelope(outcome: ScoreOutcome) -> dict[str, Any]:
    error = None
    if outcome.status == STATUS_INVALID_INPUT:
        error = {
            "kind": outcome.status,
            "field": outcome.field,
            "message": f"{_INVALID_INPUT_PREFIX}{outcome.message}",
        }
    elif outcome.status == STATUS_CALCULATION_FAILED:
        error = {
            "kind": outcome.status,
            "field": None,
            "message": f"Failed to calculate health score: {outcome.message}",
        }

    return {
        "contract_version": CONTRACT_VERSION,
        "status": "success" if outcome.ok else "error",
        "result": outcome.result.to_dict() if outcome.result is not None else None,
        "error": error,
        "timestamp": _timestamp_now(),
    }


__all__ = [
    "CONTRACT_VERSION",
    "STATUS_CALCULATION_FAILED",
    "STATUS_INVALID_INPUT",
    "STATUS_OK",
    "ScoreOutcome",
    "build_score_envelope",
    "evaluate_customer",
    "parse_customer_record",
]
