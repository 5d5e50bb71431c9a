from datetime import date

import streamlit as st

from main import assess_trademark_renewal
from registration_pdf_parser import parse_registration_pdf
from renewal_costs import RenewalType
from renewal_fee_db import get_deadline_label
from settings import configure_logging, get_settings

configure_logging()

# =========================================================
# CONFIG
# =========================================================

st.set_page_config(
    page_title="Trademark Renewal Deadlines",
    layout="wide"
)

SETTINGS = get_settings()
RENEWAL_TYPES = [t.value for t in RenewalType]


# =========================================================
# 1️⃣ REGISTRATION INPUT
# =========================================================

st.title("Trademark Renewal Deadlines")

uploaded_file = st.file_uploader("Upload Registration Certificate or TSDR Status PDF", type=["pdf"])

if uploaded_file:

    if st.button("Extract Registration Data"):

        structured_data = parse_registration_pdf(uploaded_file)

        if not structured_data["registration_date"]:
            st.warning("No registration date found. Enter it manually below.")
        else:
            st.success("Extraction Complete")
        st.json(structured_data)

        st.session_state["parsed_json"] = structured_data


parsed = st.session_state.get("parsed_json", {})

with st.form("trademark_form"):
    mark_text = st.text_input("Mark", parsed.get("mark_text", ""))
    owner_name = st.text_input("Owner", parsed.get("owner_name", ""))
    registration_number = st.text_input("Registration Number", parsed.get("registration_number", ""))
    registration_date = st.text_input("Registration Date (YYYY-MM-DD)",
                                      parsed.get("registration_date", ""))
    classes = st.text_input("International Classes (comma separated)",
                            ", ".join(parsed.get("classes", [])))
    is_foreign_based = st.checkbox("Foreign-based (Section 66(a) / Madrid Protocol)",
                                   parsed.get("is_foreign_based", False))
    renewal_type = st.selectbox("Filing", RENEWAL_TYPES,
                                index=RENEWAL_TYPES.index(SETTINGS.default_renewal_type))
    as_of = st.date_input("Calculate as of", date.today())

    submitted = st.form_submit_button("Calculate Deadlines")


# =========================================================
# 2️⃣ ASSESSMENT
# =========================================================

if submitted:

    result = assess_trademark_renewal(
        {
            "serial_number": parsed.get("serial_number", ""),
            "registration_number": registration_number,
            "mark_text": mark_text,
            "owner_name": owner_name,
            "registration_date": registration_date,
            "classes": classes,
            "is_foreign_based": is_foreign_based,
        },
        today=as_of,
        renewal_type=renewal_type,
    )

    deadlines = result["deadlines"]
    advice = result["advice"]

    if not deadlines.deadlines():
        st.error(f"Could not compute deadlines from registration date '{registration_date}'.")
    else:
        st.subheader("Deadlines")
        st.table([
            {
                "Deadline": get_deadline_label(d.deadline_type.value),
                "Date": d.iso_date,
                "Days Remaining": d.days_remaining,
                "Status": d.status.value,
                "Urgency": d.urgency_level.value,
            }
            for d in sorted(deadlines.deadlines(), key=lambda x: x.date)
        ])

    st.subheader("Next Action")
    st.json(advice.to_dict())

    st.subheader("Fee Estimate")
    st.json(result["cost_estimate"].to_dict())

    st.subheader("Reminders")
    st.json([r.to_dict() for r in result["reminders"]])

    st.subheader("Renewal Report")
    st.text_area("Report", result["report"], height=500)
