"""Next-action advice and renewal timeline for a trademark's deadlines."""

import math
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Union

from deadline_dates import as_date
from renewal_deadlines import (
    DeadlineInfo, DeadlineStatus, DeadlineType, TrademarkDeadlineSet,
    UrgencyLevel, get_renewal_status,
)
from renewal_fee_db import (
    CRITICAL_WINDOW_DAYS, DEADLINE_DESCRIPTIONS, DUE_SOON_WINDOW_DAYS,
    NEXT_ACTIONS, NO_DEADLINE_ACTION, NO_DEADLINE_RECOMMENDATIONS,
    get_recommended_actions,
)


@dataclass
class RenewalAdvice:
    next_action: str
    urgency: UrgencyLevel
    days_until_action: Union[int, float]      # math.inf when nothing is pending
    recommended_actions: List[str] = field(default_factory=list)
    status: DeadlineStatus = DeadlineStatus.CURRENT

    def to_dict(self) -> dict:
        days = self.days_until_action
        return {
            "next_action": self.next_action,
            "urgency": self.urgency.value,
            "days_until_action": None if math.isinf(days) else days,
            "recommended_actions": list(self.recommended_actions),
            "status": self.status.value,
        }


@dataclass
class TimelineEntry:
    date: date
    deadline_type: DeadlineType
    description: str
    status: str                 # "upcoming" | "overdue"
    urgency: UrgencyLevel

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "deadline_type": self.deadline_type.value,
            "description": self.description,
            "status": self.status,
            "urgency": self.urgency.value,
        }


def get_next_action(days_remaining: int) -> str:
    if days_remaining < 0:
        return NEXT_ACTIONS["overdue"]
    if days_remaining <= CRITICAL_WINDOW_DAYS:
        return NEXT_ACTIONS["file"]
    if days_remaining <= DUE_SOON_WINDOW_DAYS:
        return NEXT_ACTIONS["prepare"]
    return NEXT_ACTIONS["monitor"]


def get_renewal_advice(next_major_deadline: Optional[DeadlineInfo]) -> RenewalAdvice:
    """User-facing recommendation for the deadline a trademark should act on."""
    if next_major_deadline is None:
        return RenewalAdvice(
            next_action=NO_DEADLINE_ACTION,
            urgency=UrgencyLevel.LOW,
            days_until_action=math.inf,
            recommended_actions=list(NO_DEADLINE_RECOMMENDATIONS),
        )

    urgency = next_major_deadline.urgency_level
    return RenewalAdvice(
        next_action=get_next_action(next_major_deadline.days_remaining),
        urgency=urgency,
        days_until_action=next_major_deadline.days_remaining,
        recommended_actions=get_recommended_actions(urgency.value),
        status=get_renewal_status(
            TrademarkDeadlineSet(next_major_deadline=next_major_deadline)
        ),
    )


def get_renewal_timeline(deadlines: TrademarkDeadlineSet, today: date) -> List[TimelineEntry]:
    """Every applicable deadline in date order; due today already counts as overdue.

    Timeline status is date-based: an entry dated today is "overdue" here
    while its classifier status is still ``due_soon``.
    """
    today = as_date(today)
    timeline = [
        TimelineEntry(
            date=d.date,
            deadline_type=d.deadline_type,
            description=DEADLINE_DESCRIPTIONS[d.deadline_type.value],
            status="overdue" if d.date <= today else "upcoming",
            urgency=d.urgency_level,
        )
        for d in deadlines.deadlines()
    ]
    timeline.sort(key=lambda entry: entry.date)
    return timeline
