"""
RENEWAL COST ESTIMATOR
======================
Per-class USPTO fee estimate for a post-registration filing.

  section8   : Section 8 declaration
  section71  : Section 71 declaration (foreign-based marks only)
  renewal    : Section 9 renewal
  combined   : Section 8 + renewal (+ Section 71 when foreign-based)

An overdue filing adds the late surcharge per class regardless of type.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from renewal_deadlines import TrademarkDeadlineSet
from renewal_fee_db import FEE_CURRENCY, FEE_DISCLAIMERS, get_fee

logger = logging.getLogger(__name__)


class RenewalType(Enum):
    SECTION_8  = "section8"
    SECTION_71 = "section71"
    RENEWAL    = "renewal"
    COMBINED   = "combined"


@dataclass
class RenewalCostEstimate:
    section8_fee: int = 0
    section71_fee: int = 0
    renewal_fee: int = 0
    late_renewal_fee: Optional[int] = None    # None unless overdue
    notes: List[str] = field(default_factory=list)
    currency: str = FEE_CURRENCY

    @property
    def total_estimate(self) -> int:
        return (self.section8_fee + self.section71_fee + self.renewal_fee
                + (self.late_renewal_fee or 0))

    def to_dict(self) -> dict:
        return {
            "section8_fee": self.section8_fee,
            "section71_fee": self.section71_fee,
            "renewal_fee": self.renewal_fee,
            "late_renewal_fee": self.late_renewal_fee,
            "total_estimate": self.total_estimate,
            "currency": self.currency,
            "notes": list(self.notes),
        }


def _fee_line(label: str, per_class: int, class_count: int) -> str:
    noun = "class" if class_count == 1 else "classes"
    return f"{label}: ${per_class} × {class_count} {noun}"


def estimate_renewal_costs(class_count: int,
                           renewal_type: Union[RenewalType, str] = RenewalType.RENEWAL,
                           is_foreign_based: bool = False,
                           is_overdue: bool = False) -> RenewalCostEstimate:
    """
    Price a filing. Unknown renewal type strings raise ValueError;
    a negative class count is priced as zero classes.
    """
    renewal_type = RenewalType(renewal_type)
    if class_count < 0:
        logger.warning("Negative class count %d priced as 0", class_count)
        class_count = 0

    estimate = RenewalCostEstimate()
    notes = estimate.notes

    if renewal_type is RenewalType.SECTION_8:
        estimate.section8_fee = get_fee("section8") * class_count
        notes.append(_fee_line("Section 8 Declaration", get_fee("section8"), class_count))

    elif renewal_type is RenewalType.SECTION_71:
        if is_foreign_based:
            estimate.section71_fee = get_fee("section71") * class_count
            notes.append(_fee_line("Section 71 Declaration", get_fee("section71"), class_count))
        else:
            notes.append("Section 71 not required for US-based registrations")

    elif renewal_type is RenewalType.RENEWAL:
        estimate.renewal_fee = get_fee("renewal") * class_count
        notes.append(_fee_line("Renewal fee", get_fee("renewal"), class_count))

    elif renewal_type is RenewalType.COMBINED:
        estimate.section8_fee = get_fee("section8") * class_count
        estimate.renewal_fee = get_fee("renewal") * class_count
        notes.append(_fee_line("Section 8 + Renewal",
                               get_fee("section8") + get_fee("renewal"), class_count))
        if is_foreign_based:
            estimate.section71_fee = get_fee("section71") * class_count
            notes.append(_fee_line("Section 71 Declaration", get_fee("section71"), class_count))

    if is_overdue:
        estimate.late_renewal_fee = get_fee("late_renewal") * class_count
        notes.append(_fee_line("Late renewal penalty", get_fee("late_renewal"), class_count))

    notes.extend(FEE_DISCLAIMERS)
    return estimate


def estimate_trademark_renewal_costs(record, deadlines: TrademarkDeadlineSet,
                                     renewal_type: Union[RenewalType, str] = RenewalType.RENEWAL
                                     ) -> RenewalCostEstimate:
    """Estimate for a parsed trademark; lateness comes from its next major deadline."""
    nxt = deadlines.next_major_deadline
    is_overdue = nxt is not None and nxt.days_remaining < 0
    return estimate_renewal_costs(
        class_count=len(record.classes),
        renewal_type=renewal_type,
        is_foreign_based=record.is_foreign_based,
        is_overdue=is_overdue,
    )
