# Service layer shared by the API and the CLI.

from .health_service import (
    CONTRACT_VERSION,
    STATUS_CALCULATION_FAILED,
    STATUS_INVALID_INPUT,
    STATUS_OK,
    ScoreOutcome,
    build_score_envelope,
    evaluate_customer,
    parse_customer_record,
)

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
