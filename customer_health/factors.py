"""Per-factor health scorers.

Each scorer validates its sub-record, rescales the raw metrics into the 0-100
space, blends them with fixed internal weights and bonuses and returns an
integer score in [0, 100]. Metrics are capped at an operating ceiling before
normalization so out-of-range inputs degrade to the worst/best score instead
of producing an invalid one.

Scorers accept either their record type or a plain mapping with the same keys.
"""

from __future__ import annotations

from typing import Any, Mapping

from customer_health.exception import InvalidInputError
from customer_health.normalization import clamp_score, inverse_normalize, normalize, round_score
from customer_health.schemas import ContractInfo, EngagementMetrics, PaymentHistory, SupportData
from customer_health.validation import (
    require_bool,
    require_finite_number,
    require_in_range,
    require_non_negative_number,
    require_value,
)

# Payment: ceilings and component weights.
PAYMENT_MAX_DAYS_SINCE = 60
PAYMENT_MAX_DELAY_DAYS = 30
PAYMENT_MAX_OVERDUE = 10000
PAYMENT_CONSISTENCY_BONUS = 10

# Engagement
ENGAGEMENT_MAX_LOGINS = 60
ENGAGEMENT_MAX_FEATURES = 20
ENGAGEMENT_FREE_TICKETS = 5
ENGAGEMENT_MODERATE_TICKETS = 15
ENGAGEMENT_MAX_TICKETS = 30
ENGAGEMENT_MAX_USERS = 10
ENGAGEMENT_USER_BONUS_FACTOR = 0.15

# Contract
CONTRACT_URGENT_DAYS = 30
CONTRACT_MODERATE_DAYS = 180
CONTRACT_MAX_EXTRA_DAYS = 180
CONTRACT_MAX_VALUE = 100000
CONTRACT_UPGRADE_BONUS = 15
CONTRACT_AUTO_RENEWAL_BONUS = 10

# Support
SUPPORT_MAX_RESOLUTION_HOURS = 72
SUPPORT_MIN_SATISFACTION = 1
SUPPORT_MAX_SATISFACTION = 5
SUPPORT_MAX_ESCALATIONS = 10
SUPPORT_MAX_OPEN_TICKETS = 20


def _as_record(data: Any, record_cls):
    require_value(data, record_cls.record_name)
    if isinstance(data, record_cls):
        return data
    if isinstance(data, Mapping):
        return record_cls.from_mapping(data)
    raise InvalidInputError(record_cls.record_name, f"must be a {record_cls.__name__} or a mapping")


def calculate_payment_score(payment_data: PaymentHistory | Mapping[str, Any]) -> int:
    """Score payment behaviour.

    - days since last payment: 0 days = 100, 60+ days = 0
    - average payment delay: 0 days = 100, 30+ days = 0
    - overdue amount: 0 = 100, 10000+ = 0
    - optional consistency (0-1) adds up to 10 points
    """
    payment = _as_record(payment_data, PaymentHistory)

    days_since = require_non_negative_number(payment.days_since_last_payment, "days_since_last_payment")
    delay = require_non_negative_number(payment.average_payment_delay, "average_payment_delay")
    overdue = require_non_negative_number(payment.overdue_amount, "overdue_amount")

    consistency = payment.payment_consistency
    if consistency is not None:
        require_finite_number(consistency, "payment_consistency")
        require_in_range(consistency, 0, 1, "payment_consistency")

    days_score = inverse_normalize(min(days_since, PAYMENT_MAX_DAYS_SINCE), 0, PAYMENT_MAX_DAYS_SINCE)
    delay_score = inverse_normalize(min(delay, PAYMENT_MAX_DELAY_DAYS), 0, PAYMENT_MAX_DELAY_DAYS)
    overdue_score = inverse_normalize(min(overdue, PAYMENT_MAX_OVERDUE), 0, PAYMENT_MAX_OVERDUE)

    base_score = (days_score * 0.30) + (delay_score * 0.35) + (overdue_score * 0.35)
    if consistency is not None:
        base_score = min(100, base_score + consistency * PAYMENT_CONSISTENCY_BONUS)

    return round_score(clamp_score(base_score))


def _ticket_score(tickets: float) -> float:
    # A handful of tickets is normal; past that the score falls off in two bands.
    if tickets <= ENGAGEMENT_FREE_TICKETS:
        return 100.0
    if tickets <= ENGAGEMENT_MODERATE_TICKETS:
        return inverse_normalize(tickets, ENGAGEMENT_FREE_TICKETS, ENGAGEMENT_MODERATE_TICKETS)
    return inverse_normalize(
        min(tickets, ENGAGEMENT_MAX_TICKETS),
        ENGAGEMENT_MODERATE_TICKETS,
        ENGAGEMENT_MAX_TICKETS,
    )


def calculate_engagement_score(engagement_data: EngagementMetrics | Mapping[str, Any]) -> int:
    """Score product engagement.

    Logins (60+/month) and feature usage (20+) drive the score, support
    tickets drag it down past 5 and an optional active user count adds up to
    15 points (1 user = no bonus, 10+ users = full bonus).
    """
    engagement = _as_record(engagement_data, EngagementMetrics)

    logins = require_non_negative_number(engagement.logins_per_month, "logins_per_month")
    features = require_non_negative_number(engagement.feature_usage_count, "feature_usage_count")
    tickets = require_non_negative_number(engagement.support_tickets_opened, "support_tickets_opened")

    users = engagement.active_user_count
    if users is not None:
        require_non_negative_number(users, "active_user_count")

    login_score = normalize(min(logins, ENGAGEMENT_MAX_LOGINS), 0, ENGAGEMENT_MAX_LOGINS)
    feature_score = normalize(min(features, ENGAGEMENT_MAX_FEATURES), 0, ENGAGEMENT_MAX_FEATURES)
    ticket_score = _ticket_score(tickets)

    base_score = (login_score * 0.40) + (feature_score * 0.40) + (ticket_score * 0.20)
    if users is not None:
        user_bonus = normalize(min(users, ENGAGEMENT_MAX_USERS), 1, ENGAGEMENT_MAX_USERS) * ENGAGEMENT_USER_BONUS_FACTOR
        base_score = min(100, base_score + user_bonus)

    return round_score(clamp_score(base_score))


def _renewal_score(days_until_renewal: float) -> float:
    if days_until_renewal < 0:
        # expired
        return 0.0
    if days_until_renewal < CONTRACT_URGENT_DAYS:
        return normalize(days_until_renewal, 0, CONTRACT_URGENT_DAYS) * 0.5
    if days_until_renewal < CONTRACT_MODERATE_DAYS:
        span = CONTRACT_MODERATE_DAYS - CONTRACT_URGENT_DAYS
        return 50 + normalize(days_until_renewal - CONTRACT_URGENT_DAYS, 0, span) * 0.3
    extra_days = min(days_until_renewal - CONTRACT_MODERATE_DAYS, CONTRACT_MAX_EXTRA_DAYS)
    return 80 + normalize(extra_days, 0, CONTRACT_MAX_EXTRA_DAYS) * 0.2


def calculate_contract_score(contract_data: ContractInfo | Mapping[str, Any]) -> int:
    """Score contract status.

    Renewal distance is piecewise: under 30 days is urgent (0-50), 30-180 is
    moderate (50-80), 180+ is good (80-100) and a negative value means the
    contract already expired (0). Contract value up to 100k adds stability.
    Recent upgrades add 15 points and enabled auto-renewal adds 10.
    """
    contract = _as_record(contract_data, ContractInfo)

    require_value(contract.days_until_renewal, "days_until_renewal")
    days_until_renewal = require_finite_number(contract.days_until_renewal, "days_until_renewal")
    contract_value = require_non_negative_number(contract.contract_value, "contract_value")
    require_value(contract.has_recent_upgrades, "has_recent_upgrades")
    has_recent_upgrades = require_bool(contract.has_recent_upgrades, "has_recent_upgrades")

    auto_renewal = contract.auto_renewal_enabled
    if auto_renewal is not None:
        require_bool(auto_renewal, "auto_renewal_enabled")

    renewal_score = _renewal_score(days_until_renewal)
    value_score = normalize(min(contract_value, CONTRACT_MAX_VALUE), 0, CONTRACT_MAX_VALUE)

    upgrade_bonus = CONTRACT_UPGRADE_BONUS if has_recent_upgrades else 0
    auto_renewal_bonus = CONTRACT_AUTO_RENEWAL_BONUS if auto_renewal is True else 0

    base_score = (renewal_score * 0.5) + (value_score * 0.5)
    final_score = min(100, base_score + upgrade_bonus + auto_renewal_bonus)
    return round_score(clamp_score(final_score))


def calculate_support_score(support_data: SupportData | Mapping[str, Any]) -> int:
    """Score the support experience; satisfaction carries the most weight."""
    support = _as_record(support_data, SupportData)

    hours = require_non_negative_number(support.average_resolution_time_hours, "average_resolution_time_hours")
    require_value(support.satisfaction_score, "satisfaction_score")
    satisfaction = require_finite_number(support.satisfaction_score, "satisfaction_score")
    require_in_range(satisfaction, SUPPORT_MIN_SATISFACTION, SUPPORT_MAX_SATISFACTION, "satisfaction_score")
    escalations = require_non_negative_number(support.escalation_count, "escalation_count")
    open_tickets = require_non_negative_number(support.open_ticket_count, "open_ticket_count")

    resolution_score = inverse_normalize(
        min(hours, SUPPORT_MAX_RESOLUTION_HOURS), 0, SUPPORT_MAX_RESOLUTION_HOURS
    )
    satisfaction_score = normalize(satisfaction, SUPPORT_MIN_SATISFACTION, SUPPORT_MAX_SATISFACTION)
    escalation_score = inverse_normalize(min(escalations, SUPPORT_MAX_ESCALATIONS), 0, SUPPORT_MAX_ESCALATIONS)
    open_ticket_score = inverse_normalize(min(open_tickets, SUPPORT_MAX_OPEN_TICKETS), 0, SUPPORT_MAX_OPEN_TICKETS)

    final_score = (
        (resolution_score * 0.25)
        + (satisfaction_score * 0.40)
        + (escalation_score * 0.20)
        + (open_ticket_score * 0.15)
    )
    return round_score(clamp_score(final_score))


__all__ = [
    "calculate_contract_score",
    "calculate_engagement_score",
    "calculate_payment_score",
    "calculate_support_score",
]
