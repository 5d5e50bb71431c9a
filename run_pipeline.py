"""
run_pipeline.py
================
TRADEMARK RENEWAL DEADLINE RUNNER
==================================
Paste your trademark registration data into MY_TRADEMARK below.
Then run: python run_pipeline.py [YYYY-MM-DD]

The optional date argument calculates deadlines as of that day
instead of today.
"""

import sys
from datetime import date

from deadline_dates import parse_registration_date
from main import assess_trademark_renewal
from settings import configure_logging


# ═══════════════════════════════════════════════════════════════════════════════
#  ✏️  PASTE YOUR REGISTRATION DATA HERE
# ═══════════════════════════════════════════════════════════════════════════════

MY_TRADEMARK = {

    # ── Registration ───────────────────────────────────────────────────────────
    "serial_number":       "86123456",
    "registration_number": "4712345",
    "mark_text":           "NEXAFLOW",
    "owner_name":          "TechVista Solutions Inc.",
    "registration_date":   "2015-03-01",           # YYYY-MM-DD

    # ── Classes ────────────────────────────────────────────────────────────────
    "classes":             ["009", "042"],

    # ── Basis ──────────────────────────────────────────────────────────────────
    "is_foreign_based":    False,                  # True for 66(a) / Madrid marks
}

RENEWAL_TYPE = "combined"    # section8 | section71 | renewal | combined


# ═══════════════════════════════════════════════════════════════════════════════
# RUN — Do not edit below this line
# ═══════════════════════════════════════════════════════════════════════════════

def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    configure_logging()

    today = date.today()
    if argv:
        today = parse_registration_date(argv[0])
        if today is None:
            print(f"  Invalid date: {argv[0]!r} (expected YYYY-MM-DD)")
            return 2

    result = assess_trademark_renewal(MY_TRADEMARK, today=today, renewal_type=RENEWAL_TYPE)
    print(result["report"])

    line = "─" * 70
    status = result["renewal_status"].value.replace("_", " ").upper()
    print(f"\n{line}")
    print("  RENEWAL CONCLUSION")
    print(f"  Renewal Status:  {status}")
    print(f"  Next Action   :  {result['advice'].next_action}")
    print(f"  Estimated Fees:  ${result['cost_estimate'].total_estimate:,}")
    print(f"{line}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
