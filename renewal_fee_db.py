"""
TRADEMARK RENEWAL REFERENCE DATA — USPTO Post-Registration Maintenance
Fee schedule, reminder offsets, deadline descriptions and canned
recommendations used by the renewal deadline engine.
"""

# ─────────────────────────────────────────────────────────────────────────────
# USPTO POST-REGISTRATION FEES (per class, USD)
# ─────────────────────────────────────────────────────────────────────────────

USPTO_RENEWAL_FEES = {
    "section8": 225,           # Declaration of Use, per class
    "section71": 150,          # Madrid Protocol declaration, per class
    "renewal": 400,            # Section 9 renewal, per class
    "late_renewal": 100,       # Grace-period surcharge, per class
}

FEE_SCHEDULE_YEAR = 2024
FEE_CURRENCY = "USD"

FEE_DISCLAIMERS = [
    f"Fees are current as of {FEE_SCHEDULE_YEAR} and subject to change",
    "Attorney fees not included in estimate",
]


# ─────────────────────────────────────────────────────────────────────────────
# CLASSIFICATION THRESHOLDS (days remaining)
# ─────────────────────────────────────────────────────────────────────────────

DUE_SOON_WINDOW_DAYS = 90
CRITICAL_WINDOW_DAYS = 30
HIGH_WINDOW_DAYS = 90
MEDIUM_WINDOW_DAYS = 365


# ─────────────────────────────────────────────────────────────────────────────
# REMINDER SCHEDULE — days before the due date
# ─────────────────────────────────────────────────────────────────────────────

STANDARD_REMINDER_SCHEDULE = [365, 180, 90, 60, 30, 14, 7, 3, 1]


# ─────────────────────────────────────────────────────────────────────────────
# DEADLINE DESCRIPTIONS
# ─────────────────────────────────────────────────────────────────────────────

DEADLINE_LABELS = {
    "grace_period": "Grace Period",
    "renewal": "Renewal (Section 9)",
    "section8": "Section 8 Declaration",
    "section71": "Section 71 Declaration",
}

DEADLINE_DESCRIPTIONS = {
    "grace_period": "Grace period expires",
    "renewal": "Trademark renewal due",
    "section8": "Section 8 Declaration due - Affidavit of Use",
    "section71": "Section 71 Declaration due - Foreign registration",
}


# ─────────────────────────────────────────────────────────────────────────────
# NEXT ACTIONS AND RECOMMENDATIONS
# ─────────────────────────────────────────────────────────────────────────────

NO_DEADLINE_ACTION = "Monitor for upcoming deadlines"
NO_DEADLINE_RECOMMENDATIONS = [
    "Set up renewal reminders",
    "Review trademark status periodically",
]

NEXT_ACTIONS = {
    "overdue": "File overdue renewal immediately",
    "file": "File renewal documents",
    "prepare": "Prepare renewal filing",
    "monitor": "Monitor renewal timeline",
}

RECOMMENDED_ACTIONS = {
    "critical": [
        "File renewal documents immediately",
        "Consider expedited processing",
        "Contact USPTO or attorney",
    ],
    "high": [
        "Prepare renewal documentation",
        "Review goods and services",
        "Schedule filing within 30 days",
    ],
    "medium": [
        "Begin renewal preparation",
        "Update ownership information if needed",
        "Budget for renewal fees",
    ],
    "low": [
        "Monitor renewal timeline",
        "Confirm contact information is current",
    ],
}


def get_fee(fee_key: str) -> int:
    """Return the per-class fee for a fee key."""
    return USPTO_RENEWAL_FEES[fee_key]


def get_recommended_actions(urgency_value: str) -> list:
    """Return a fresh copy of the canned recommendations for an urgency tier."""
    return list(RECOMMENDED_ACTIONS.get(urgency_value, RECOMMENDED_ACTIONS["low"]))


def get_deadline_label(deadline_type_value: str) -> str:
    return DEADLINE_LABELS.get(deadline_type_value, deadline_type_value)
