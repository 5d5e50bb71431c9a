"""
TRADEMARK RENEWAL — PLAIN-TEXT REPORT GENERATOR
===============================================
Output layer only. Zero date arithmetic.
All values come from the deadline engine, advisor and cost estimator unchanged.
"""

import math
from datetime import date
from typing import List, Optional

from renewal_advisor import RenewalAdvice
from renewal_costs import RenewalCostEstimate
from renewal_deadlines import DeadlineInfo, TrademarkDeadlineSet, UrgencyLevel
from renewal_fee_db import get_deadline_label
from renewal_reminders import RenewalReminder


def format_long_date(value: date) -> str:
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def format_deadline(deadline: DeadlineInfo) -> str:
    """'March 1, 2025 (425 days)' style summary of a deadline."""
    formatted_date = format_long_date(deadline.date)
    days = deadline.days_remaining

    if days < 0:
        return f"{formatted_date} ({abs(days)} days overdue)"
    if days == 0:
        return f"{formatted_date} (Due today!)"
    if days == 1:
        return f"{formatted_date} (Due tomorrow)"
    return f"{formatted_date} ({days} days)"


class RenewalReportGenerator:

    # Severity symbols kept minimal
    _URGENCY_SYM = {
        UrgencyLevel.CRITICAL: "■",
        UrgencyLevel.HIGH: "▲",
        UrgencyLevel.MEDIUM: "◆",
        UrgencyLevel.LOW: "✓",
    }

    def __init__(self, record, deadlines: TrademarkDeadlineSet,
                 advice: RenewalAdvice,
                 estimate: Optional[RenewalCostEstimate] = None,
                 reminders: Optional[List[RenewalReminder]] = None,
                 today: Optional[date] = None):
        self.record = record
        self.deadlines = deadlines
        self.advice = advice
        self.estimate = estimate
        self.reminders = reminders or []
        self.today = today

    # ─────────────────────────────────────────────────────────────────────────
    # PUBLIC ENTRY — called by assess_trademark_renewal()
    # ─────────────────────────────────────────────────────────────────────────

    def generate_full_report(self) -> str:
        blocks = [
            self._header(),
            self._trademark_summary(),
            self._overall_status(),
            self._deadline_table(),
            self._next_action(),
            self._fee_estimate(),
            self._reminder_schedule(),
            self._footer(),
        ]
        return "\n".join(b for b in blocks if b.strip())

    # ─────────────────────────────────────────────────────────────────────────
    # 1. HEADER
    # ─────────────────────────────────────────────────────────────────────────

    def _header(self) -> str:
        line = "─" * 70
        prepared = format_long_date(self.today) if self.today else "—"
        return (
            f"\n{line}\n"
            f"  TRADEMARK RENEWAL & MAINTENANCE REPORT\n"
            f"  USPTO Sections 8, 9 and 71\n"
            f"  Prepared: {prepared}\n"
            f"{line}"
        )

    # ─────────────────────────────────────────────────────────────────────────
    # 2. TRADEMARK SUMMARY
    # ─────────────────────────────────────────────────────────────────────────

    def _trademark_summary(self) -> str:
        rec = self.record
        classes_str = ", ".join(rec.classes) if rec.classes else "—"
        basis = "Foreign (Section 66(a) / 44(e))" if rec.is_foreign_based else "Domestic"

        return "\n".join([
            "\nTRADEMARK SUMMARY",
            f"  Mark                :  {rec.mark_text or '—'}",
            f"  Owner               :  {rec.owner_name or '—'}",
            f"  Serial Number       :  {rec.serial_number or '—'}",
            f"  Registration Number :  {rec.registration_number or 'Not registered'}",
            f"  Registration Date   :  {rec.registration_date or '—'}",
            f"  Classes             :  {classes_str}",
            f"  Filing Basis        :  {basis}",
        ])

    # ─────────────────────────────────────────────────────────────────────────
    # 3. OVERALL STATUS
    # ─────────────────────────────────────────────────────────────────────────

    def _overall_status(self) -> str:
        nxt = self.deadlines.next_major_deadline
        verdict = self.advice.status.value.replace("_", " ").upper()

        if nxt is None:
            note = "No maintenance deadlines could be computed from the registration date."
        else:
            label = get_deadline_label(nxt.deadline_type.value)
            note = f"Next major deadline: {label}, {format_deadline(nxt)}."

        return (
            f"\nOVERALL STATUS\n"
            f"  {verdict}\n"
            f"  {note}"
        )

    # ─────────────────────────────────────────────────────────────────────────
    # 4. DEADLINES
    # ─────────────────────────────────────────────────────────────────────────

    def _deadline_table(self) -> str:
        deadlines = self.deadlines.deadlines()
        if not deadlines:
            return "\nDEADLINES\n  None applicable."

        lines = ["\nDEADLINES"]
        for d in sorted(deadlines, key=lambda x: x.date):
            sym = self._URGENCY_SYM[d.urgency_level]
            label = get_deadline_label(d.deadline_type.value)
            lines.append(
                f"  {sym} {label:<24} {format_deadline(d)}"
                f"  [{d.urgency_level.value}]"
            )
        return "\n".join(lines)

    # ─────────────────────────────────────────────────────────────────────────
    # 5. NEXT ACTION
    # ─────────────────────────────────────────────────────────────────────────

    def _next_action(self) -> str:
        advice = self.advice
        days = advice.days_until_action
        when = "no pending deadline" if math.isinf(days) else f"{days} day(s)"

        lines = [
            "\nNEXT ACTION",
            f"  {advice.next_action}  ({when}, urgency: {advice.urgency.value})",
        ]
        for i, action in enumerate(advice.recommended_actions, 1):
            lines.append(f"  {i}. {action}")
        return "\n".join(lines)

    # ─────────────────────────────────────────────────────────────────────────
    # 6. FEE ESTIMATE
    # ─────────────────────────────────────────────────────────────────────────

    def _fee_estimate(self) -> str:
        est = self.estimate
        if est is None:
            return ""

        lines = ["\nFEE ESTIMATE"]
        if est.section8_fee:
            lines.append(f"  Section 8 Declaration   :  ${est.section8_fee:,}")
        if est.section71_fee:
            lines.append(f"  Section 71 Declaration  :  ${est.section71_fee:,}")
        if est.renewal_fee:
            lines.append(f"  Renewal                 :  ${est.renewal_fee:,}")
        if est.late_renewal_fee:
            lines.append(f"  Late surcharge          :  ${est.late_renewal_fee:,}")
        lines.append(f"  Total ({est.currency})             :  ${est.total_estimate:,}")
        for note in est.notes:
            lines.append(f"      · {note}")
        return "\n".join(lines)

    # ─────────────────────────────────────────────────────────────────────────
    # 7. REMINDERS
    # ─────────────────────────────────────────────────────────────────────────

    def _reminder_schedule(self) -> str:
        if not self.reminders:
            return ""

        lines = ["\nREMINDER SCHEDULE"]
        for reminder in self.reminders:
            label = get_deadline_label(reminder.deadline_type.value)
            if reminder.reminder_dates:
                dates = ", ".join(d.isoformat() for d in reminder.reminder_dates)
            else:
                dates = "no future reminders"
            lines.append(f"  {label:<24} {dates}")
        return "\n".join(lines)

    # ─────────────────────────────────────────────────────────────────────────
    # 8. FOOTER
    # ─────────────────────────────────────────────────────────────────────────

    def _footer(self) -> str:
        return (
            "\n" + "─" * 70 + "\n"
            "  Deadlines are computed from the registration date only.\n"
            "  This report does not constitute legal advice. Confirm dates in TSDR\n"
            "  and consult a trademark attorney before filing.\n"
            "  Reference: https://www.uspto.gov/trademarks/maintain\n"
            + "─" * 70
        )
