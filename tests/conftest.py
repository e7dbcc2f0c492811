import copy

import pytest

from customer_health.schemas import CustomerHealthData


HEALTHY_RECORD = {
    "customer_id": "1",
    "payment": {
        "days_since_last_payment": 5,
        "average_payment_delay": 1,
        "overdue_amount": 0,
        "payment_consistency": 0.95,
    },
    "engagement": {
        "logins_per_month": 48,
        "feature_usage_count": 16,
        "support_tickets_opened": 2,
        "active_user_count": 12,
    },
    "contract": {
        "days_until_renewal": 240,
        "contract_value": 75000,
        "has_recent_upgrades": True,
        "auto_renewal_enabled": True,
    },
    "support": {
        "average_resolution_time_hours": 6,
        "satisfaction_score": 4.8,
        "escalation_count": 0,
        "open_ticket_count": 1,
    },
}

WARNING_RECORD = {
    "customer_id": "2",
    "payment": {
        "days_since_last_payment": 28,
        "average_payment_delay": 12,
        "overdue_amount": 2500,
        "payment_consistency": 0.65,
    },
    "engagement": {
        "logins_per_month": 18,
        "feature_usage_count": 6,
        "support_tickets_opened": 8,
        "active_user_count": 3,
    },
    "contract": {
        "days_until_renewal": 45,
        "contract_value": 15000,
        "has_recent_upgrades": False,
        "auto_renewal_enabled": False,
    },
    "support": {
        "average_resolution_time_hours": 36,
        "satisfaction_score": 3.2,
        "escalation_count": 2,
        "open_ticket_count": 4,
    },
}

CRITICAL_RECORD = {
    "customer_id": "3",
    "payment": {
        "days_since_last_payment": 55,
        "average_payment_delay": 28,
        "overdue_amount": 8500,
        "payment_consistency": 0.35,
    },
    "engagement": {
        "logins_per_month": 4,
        "feature_usage_count": 2,
        "support_tickets_opened": 18,
        "active_user_count": 1,
    },
    "contract": {
        "days_until_renewal": 15,
        "contract_value": 12000,
        "has_recent_upgrades": False,
        "auto_renewal_enabled": False,
    },
    "support": {
        "average_resolution_time_hours": 68,
        "satisfaction_score": 1.8,
        "escalation_count": 7,
        "open_ticket_count": 12,
    },
}


@pytest.fixture
def healthy_record():
    return copy.deepcopy(HEALTHY_RECORD)


@pytest.fixture
def warning_record():
    return copy.deepcopy(WARNING_RECORD)


@pytest.fixture
def critical_record():
    return copy.deepcopy(CRITICAL_RECORD)


@pytest.fixture
def healthy_customer():
    return CustomerHealthData.from_mapping(HEALTHY_RECORD)


@pytest.fixture
def critical_customer():
    return CustomerHealthData.from_mapping(CRITICAL_RECORD)
