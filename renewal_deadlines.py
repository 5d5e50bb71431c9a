"""
TRADEMARK RENEWAL DEADLINE ENGINE
=================================
Post-registration maintenance deadlines for a registered mark.

  Grace period  : registration + 9 years 6 months
  Renewal       : next registration + 10k years still in the future
  Section 8     : +5, +9, then the +9 mark of every following decade
  Section 71    : registration + 5 years (foreign-based marks only)

Every calculator takes the current date explicitly as ``today``.
Status and urgency are derived from days remaining on every access.
"""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, List, Optional

from deadline_dates import (
    DateLike, add_years, add_years_months, as_date, days_between,
    parse_registration_date,
)
from renewal_fee_db import (
    CRITICAL_WINDOW_DAYS, DUE_SOON_WINDOW_DAYS, HIGH_WINDOW_DAYS,
    MEDIUM_WINDOW_DAYS,
)

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# ENUMS
# ═══════════════════════════════════════════════════════════════════════════════

class DeadlineType(Enum):
    """Which statutory filing a deadline belongs to."""
    GRACE_PERIOD = "grace_period"
    RENEWAL      = "renewal"
    SECTION_8    = "section8"
    SECTION_71   = "section71"


class DeadlineStatus(Enum):
    CURRENT  = "current"
    DUE_SOON = "due_soon"
    OVERDUE  = "overdue"
    EXPIRED  = "expired"


class UrgencyLevel(Enum):
    """Four-tier urgency derived solely from days remaining."""
    LOW      = "low"
    MEDIUM   = "medium"
    HIGH     = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _URGENCY_RANK[self]


_URGENCY_RANK = {
    UrgencyLevel.CRITICAL: 4,
    UrgencyLevel.HIGH: 3,
    UrgencyLevel.MEDIUM: 2,
    UrgencyLevel.LOW: 1,
}


# ═══════════════════════════════════════════════════════════════════════════════
# CLASSIFIER
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class DeadlineClassification:
    status: DeadlineStatus
    urgency_level: UrgencyLevel


def get_deadline_status(days_remaining: int) -> DeadlineStatus:
    """Due today counts as due soon, not overdue."""
    if days_remaining < 0:
        return DeadlineStatus.OVERDUE
    if days_remaining <= DUE_SOON_WINDOW_DAYS:
        return DeadlineStatus.DUE_SOON
    return DeadlineStatus.CURRENT


def get_urgency_level(days_remaining: int) -> UrgencyLevel:
    # Overdue deadlines are critical as well.
    if days_remaining <= CRITICAL_WINDOW_DAYS:
        return UrgencyLevel.CRITICAL
    if days_remaining <= HIGH_WINDOW_DAYS:
        return UrgencyLevel.HIGH
    if days_remaining <= MEDIUM_WINDOW_DAYS:
        return UrgencyLevel.MEDIUM
    return UrgencyLevel.LOW


def classify_deadline(days_remaining: int) -> DeadlineClassification:
    return DeadlineClassification(
        status=get_deadline_status(days_remaining),
        urgency_level=get_urgency_level(days_remaining),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# DATA STRUCTURES
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class DeadlineInfo:
    """A statutory due date measured against a given day."""
    date: date                    # Statutory due date
    days_remaining: int           # date - today; negative means overdue
    deadline_type: DeadlineType

    @property
    def status(self) -> DeadlineStatus:
        return get_deadline_status(self.days_remaining)

    @property
    def urgency_level(self) -> UrgencyLevel:
        return get_urgency_level(self.days_remaining)

    @property
    def iso_date(self) -> str:
        return self.date.isoformat()

    def to_dict(self) -> dict:
        return {
            "date": self.iso_date,
            "days_remaining": self.days_remaining,
            "deadline_type": self.deadline_type.value,
            "status": self.status.value,
            "urgency_level": self.urgency_level.value,
        }


@dataclass
class TrademarkDeadlineSet:
    """All applicable deadlines for one trademark plus the one to surface."""
    grace_period: Optional[DeadlineInfo] = None
    renewal: Optional[DeadlineInfo] = None
    section8: Optional[DeadlineInfo] = None
    section71: Optional[DeadlineInfo] = None
    next_major_deadline: Optional[DeadlineInfo] = None

    def deadlines(self) -> List[DeadlineInfo]:
        """Non-null deadlines in grace/renewal/section8/section71 order."""
        candidates = [self.grace_period, self.renewal, self.section8, self.section71]
        return [d for d in candidates if d is not None]

    def to_dict(self) -> dict:
        def _dump(d):
            return d.to_dict() if d else None

        return {
            "grace_period": _dump(self.grace_period),
            "renewal": _dump(self.renewal),
            "section8": _dump(self.section8),
            "section71": _dump(self.section71),
            "next_major_deadline": _dump(self.next_major_deadline),
        }


def create_deadline_info(target: date, today: date,
                         deadline_type: DeadlineType) -> DeadlineInfo:
    return DeadlineInfo(
        date=target,
        days_remaining=days_between(as_date(today), target),
        deadline_type=deadline_type,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# CALCULATORS
# ═══════════════════════════════════════════════════════════════════════════════

def calculate_grace_period_deadline(registration_date: DateLike,
                                    today: date) -> Optional[DeadlineInfo]:
    """Registration date + 9 years + 6 months."""
    reg_date = parse_registration_date(registration_date)
    if reg_date is None:
        return None

    try:
        target = add_years_months(reg_date, 9, 6)
    except (ValueError, OverflowError) as exc:
        logger.debug("Grace period out of range for %s: %s", reg_date, exc)
        return None
    return create_deadline_info(target, today, DeadlineType.GRACE_PERIOD)


def calculate_renewal_deadline(registration_date: DateLike,
                               today: date) -> Optional[DeadlineInfo]:
    """
    First 10-year boundary after registration that is strictly later
    than ``today``. A renewal that fell due in an earlier decade is
    superseded by the next one.
    """
    reg_date = parse_registration_date(registration_date)
    if reg_date is None:
        return None
    today = as_date(today)

    try:
        years = 10
        target = add_years(reg_date, years)
        while target <= today:
            years += 10
            target = add_years(reg_date, years)
    except (ValueError, OverflowError) as exc:
        logger.debug("Renewal deadline out of range for %s: %s", reg_date, exc)
        return None
    return create_deadline_info(target, today, DeadlineType.RENEWAL)


def calculate_section8_deadline(registration_date: DateLike,
                                today: date) -> Optional[DeadlineInfo]:
    """
    Next Section 8 declaration, counted in calendar years since registration:

      fewer than 5 years  -> +5
      fewer than 9 years  -> +9
      otherwise           -> +9 of the first later decade whose +9 year
                             is after the current calendar year
    """
    reg_date = parse_registration_date(registration_date)
    if reg_date is None:
        return None
    today = as_date(today)

    years_since_reg = today.year - reg_date.year
    if years_since_reg < 5:
        offset = 5
    elif years_since_reg < 9:
        offset = 9
    else:
        cycle_start = 10
        while reg_date.year + cycle_start + 9 <= today.year:
            cycle_start += 10
        offset = cycle_start + 9

    try:
        target = add_years(reg_date, offset)
    except (ValueError, OverflowError) as exc:
        logger.debug("Section 8 deadline out of range for %s: %s", reg_date, exc)
        return None
    return create_deadline_info(target, today, DeadlineType.SECTION_8)


def calculate_section71_deadline(registration_date: DateLike, today: date,
                                 is_foreign_based: bool = False) -> Optional[DeadlineInfo]:
    """Registration date + 5 years; None for domestic marks."""
    if not is_foreign_based:
        return None

    reg_date = parse_registration_date(registration_date)
    if reg_date is None:
        return None

    try:
        target = add_years(reg_date, 5)
    except (ValueError, OverflowError) as exc:
        logger.debug("Section 71 deadline out of range for %s: %s", reg_date, exc)
        return None
    return create_deadline_info(target, today, DeadlineType.SECTION_71)


# ═══════════════════════════════════════════════════════════════════════════════
# AGGREGATOR
# ═══════════════════════════════════════════════════════════════════════════════

def select_next_major_deadline(
        deadlines: Iterable[Optional[DeadlineInfo]]) -> Optional[DeadlineInfo]:
    """
    Most urgent deadline first; among equally urgent ones the soonest
    (or most overdue) wins. Returns one of the given objects, or None.
    """
    present = [d for d in deadlines if d is not None]
    if not present:
        return None
    present.sort(key=lambda d: (-d.urgency_level.rank, d.days_remaining))
    return present[0]


def calculate_all_trademark_deadlines(registration_date: DateLike, today: date,
                                      is_foreign_based: bool = False) -> TrademarkDeadlineSet:
    deadlines = TrademarkDeadlineSet()
    if not registration_date:
        return deadlines

    deadlines.grace_period = calculate_grace_period_deadline(registration_date, today)
    deadlines.renewal = calculate_renewal_deadline(registration_date, today)
    deadlines.section8 = calculate_section8_deadline(registration_date, today)
    if is_foreign_based:
        deadlines.section71 = calculate_section71_deadline(
            registration_date, today, is_foreign_based=True
        )

    deadlines.next_major_deadline = select_next_major_deadline(deadlines.deadlines())
    return deadlines


def get_renewal_status(deadlines: TrademarkDeadlineSet) -> DeadlineStatus:
    """Overall renewal status of a trademark from its next major deadline."""
    nxt = deadlines.next_major_deadline
    if nxt is None:
        return DeadlineStatus.CURRENT
    if nxt.days_remaining < 0:
        return DeadlineStatus.OVERDUE
    if nxt.urgency_level in (UrgencyLevel.CRITICAL, UrgencyLevel.HIGH):
        return DeadlineStatus.DUE_SOON
    return DeadlineStatus.CURRENT
