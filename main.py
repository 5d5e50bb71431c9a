"""
main.py
========
ENTRY POINT — Trademark Renewal Deadline Engine

Purpose:
Accept structured trademark JSON
Compute maintenance deadlines, advice, fees and reminders
Return structured result for UI layer

No CLI.
No sample data.
Pure engine adapter.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from renewal_advisor import get_renewal_advice, get_renewal_timeline
from renewal_costs import RenewalType, estimate_trademark_renewal_costs
from renewal_deadlines import calculate_all_trademark_deadlines, get_renewal_status
from renewal_reminders import ReminderSettings, schedule_renewal_reminders
from renewal_report import RenewalReportGenerator
from settings import get_settings

logger = logging.getLogger(__name__)


@dataclass
class TrademarkRecord:
    """Renewal inputs for one registered mark."""
    serial_number: str = ""
    registration_number: str = ""
    mark_text: str = ""
    owner_name: str = ""
    registration_date: str = ""              # Any format dateutil can parse
    classes: List[str] = field(default_factory=list)
    is_foreign_based: bool = False

    @property
    def trademark_id(self) -> str:
        return self.registration_number or self.serial_number


# =========================================================
# PARSE STRUCTURED JSON → DATACLASS MODEL
# =========================================================

def parse_trademark(record_dict: Dict[str, Any]) -> TrademarkRecord:
    """
    Convert structured JSON into a TrademarkRecord.
    Expected format matches registration_pdf_parser output.
    """

    classes = record_dict.get("classes") or []
    if isinstance(classes, str):
        classes = classes.split(",")

    # Fees are counted per unique class: "9" and "009" are the same class
    unique_classes = []
    for raw in classes:
        value = str(raw).strip()
        if not value:
            continue
        if value.isdigit():
            value = f"{int(value):03d}"
        if value not in unique_classes:
            unique_classes.append(value)

    return TrademarkRecord(
        serial_number=str(record_dict.get("serial_number", "") or ""),
        registration_number=str(record_dict.get("registration_number", "") or ""),
        mark_text=record_dict.get("mark_text", "") or "",
        owner_name=record_dict.get("owner_name", "") or "",
        registration_date=str(record_dict.get("registration_date", "") or ""),
        classes=unique_classes,
        is_foreign_based=bool(record_dict.get("is_foreign_based", False)),
    )


# =========================================================
# MAIN ENGINE FUNCTION
# =========================================================

def assess_trademark_renewal(record_dict: Dict[str, Any],
                             today: Optional[date] = None,
                             renewal_type: Optional[str] = None,
                             reminder_settings: Optional[ReminderSettings] = None
                             ) -> Dict[str, Any]:
    """
    Primary entry point used by the Streamlit UI and run_pipeline.py.

    Input:
        structured trademark JSON

    Output:
        {
            "trademark": TrademarkRecord,
            "deadlines": TrademarkDeadlineSet,
            "renewal_status": DeadlineStatus,
            "advice": RenewalAdvice,
            "cost_estimate": RenewalCostEstimate,
            "reminders": List[RenewalReminder],
            "timeline": List[TimelineEntry],
            "report": str
        }
    """
    settings = get_settings()
    today = today or date.today()
    renewal_type = RenewalType(renewal_type or settings.default_renewal_type)
    if reminder_settings is None:
        reminder_settings = ReminderSettings(custom_schedule=list(settings.reminder_offsets))

    # 1️⃣ Parse JSON → dataclass
    record = parse_trademark(record_dict)

    # 2️⃣ Deadlines + next major deadline
    deadlines = calculate_all_trademark_deadlines(
        record.registration_date, today, is_foreign_based=record.is_foreign_based
    )
    if not deadlines.deadlines():
        logger.info("No deadlines for %s: registration date %r not usable",
                    record.trademark_id or "trademark", record.registration_date)

    # 3️⃣ Advice, fees, reminders
    advice = get_renewal_advice(deadlines.next_major_deadline)
    estimate = estimate_trademark_renewal_costs(record, deadlines, renewal_type)
    reminders = schedule_renewal_reminders(
        deadlines, reminder_settings, trademark_id=record.trademark_id
    )

    # 4️⃣ Plain-text report
    report = RenewalReportGenerator(
        record, deadlines, advice, estimate, reminders, today
    ).generate_full_report()

    return {
        "trademark": record,
        "deadlines": deadlines,
        "renewal_status": get_renewal_status(deadlines),
        "advice": advice,
        "cost_estimate": estimate,
        "reminders": reminders,
        "timeline": get_renewal_timeline(deadlines, today),
        "report": report,
    }
