import dataclasses
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from customer_health.exception import InvalidInputError
from customer_health.schemas import (
    ContractInfo,
    CustomerHealthData,
    FactorScore,
    HealthScoreResult,
    PaymentHistory,
)


def test_payment_history_from_mapping_accepts_camel_case_keys():
    payment = PaymentHistory.from_mapping(
        {
            "daysSinceLastPayment": 5,
            "averagePaymentDelay": 1,
            "overdueAmount": 0,
        }
    )

    assert payment.days_since_last_payment == 5
    assert payment.average_payment_delay == 1
    assert payment.overdue_amount == 0
    assert payment.payment_consistency is None


def test_from_mapping_missing_required_field_names_it():
    with pytest.raises(InvalidInputError, match="overdue_amount") as exc_info:
        PaymentHistory.from_mapping({"days_since_last_payment": 5, "average_payment_delay": 1})

    assert exc_info.value.field == "overdue_amount"


def test_from_mapping_keeps_false_flags():
    contract = ContractInfo.from_mapping(
        {
            "days_until_renewal": -3,
            "contract_value": 100,
            "has_recent_upgrades": False,
            "auto_renewal_enabled": False,
        }
    )

    assert contract.has_recent_upgrades is False
    assert contract.auto_renewal_enabled is False


def test_from_mapping_rejects_non_mapping():
    with pytest.raises(InvalidInputError, match="payment must be an object"):
        PaymentHistory.from_mapping([5, 1, 0])


def test_customer_health_data_requires_every_sub_record(healthy_record):
    healthy_record.pop("support")

    with pytest.raises(InvalidInputError, match="support is required"):
        CustomerHealthData.from_mapping(healthy_record)


def test_customer_health_data_passes_customer_id_through(healthy_record):
    healthy_record.pop("customer_id")
    healthy_record["customerId"] = "CUST-001"

    customer = CustomerHealthData.from_mapping(healthy_record)

    assert customer.customer_id == "CUST-001"
    assert customer.payment.payment_consistency == 0.95


def test_records_are_immutable(healthy_customer):
    with pytest.raises(dataclasses.FrozenInstanceError):
        healthy_customer.payment.overdue_amount = 10


def test_health_score_result_to_dict_is_json_ready():
    result = HealthScoreResult(
        overall_score=42,
        risk_level="warning",
        breakdown={
            "payment": FactorScore(score=50, weight=Decimal("0.40"), weighted_score=Decimal("20.00")),
        },
        calculated_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
        customer_id="cust-9",
    )

    assert result.to_dict() == {
        "customer_id": "cust-9",
        "overall_score": 42,
        "risk_level": "warning",
        "breakdown": {"payment": {"score": 50, "weight": 0.4, "weighted_score": 20.0}},
        "calculated_at": "2025-01-01T00:00:00+00:00",
    }
