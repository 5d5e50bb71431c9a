"""
Reminder schedules for trademark maintenance deadlines.

Only computes trigger dates; sending email/SMS/dashboard alerts is the
job of whatever dispatcher consumes ``RenewalReminder`` objects.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence

from renewal_deadlines import DeadlineInfo, DeadlineType, TrademarkDeadlineSet
from renewal_fee_db import STANDARD_REMINDER_SCHEDULE

logger = logging.getLogger(__name__)


@dataclass
class ReminderSettings:
    """Delivery preferences for a trademark's reminders."""
    email: bool = True
    dashboard: bool = True
    sms: bool = False
    custom_schedule: Optional[List[int]] = None   # Days before deadline
    escalation_enabled: bool = True

    @property
    def channels(self) -> List[str]:
        enabled = [("email", self.email), ("dashboard", self.dashboard), ("sms", self.sms)]
        return [name for name, on in enabled if on]


@dataclass
class RenewalReminder:
    reminder_id: str
    deadline_type: DeadlineType
    due_date: date
    reminder_dates: List[date] = field(default_factory=list)
    channels: List[str] = field(default_factory=list)
    escalation_enabled: bool = True
    is_active: bool = True

    def to_dict(self) -> dict:
        return {
            "reminder_id": self.reminder_id,
            "deadline_type": self.deadline_type.value,
            "due_date": self.due_date.isoformat(),
            "reminder_dates": [d.isoformat() for d in self.reminder_dates],
            "channels": list(self.channels),
            "escalation_enabled": self.escalation_enabled,
            "is_active": self.is_active,
        }


def reminder_offsets(deadline: DeadlineInfo,
                     offsets: Optional[Sequence[int]] = None) -> List[int]:
    """Offsets (days before due) whose trigger point has not yet passed."""
    if offsets is None:
        offsets = STANDARD_REMINDER_SCHEDULE
    return [days for days in offsets if days < deadline.days_remaining]


def generate_reminder_schedule(deadline: DeadlineInfo,
                               offsets: Optional[Sequence[int]] = None) -> List[date]:
    """Reminder trigger dates for a deadline, in offset-table order."""
    return [
        deadline.date - timedelta(days=days)
        for days in reminder_offsets(deadline, offsets)
    ]


def schedule_renewal_reminders(deadlines: TrademarkDeadlineSet,
                               settings: Optional[ReminderSettings] = None,
                               trademark_id: str = "") -> List[RenewalReminder]:
    """One reminder plan per applicable deadline of a trademark."""
    settings = settings or ReminderSettings()
    prefix = f"{trademark_id}-" if trademark_id else ""

    reminders = []
    for deadline in deadlines.deadlines():
        reminders.append(RenewalReminder(
            reminder_id=f"{prefix}{deadline.deadline_type.value}-{deadline.iso_date}",
            deadline_type=deadline.deadline_type,
            due_date=deadline.date,
            reminder_dates=generate_reminder_schedule(deadline, settings.custom_schedule),
            channels=settings.channels,
            escalation_enabled=settings.escalation_enabled,
        ))

    logger.debug("Scheduled %d reminder plan(s) for %s",
                 len(reminders), trademark_id or "trademark")
    return reminders


def reminders_due_on(reminders: Iterable[RenewalReminder], day: date) -> List[RenewalReminder]:
    """Active reminder plans with a trigger on ``day``."""
    return [r for r in reminders if r.is_active and day in r.reminder_dates]
