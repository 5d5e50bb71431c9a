"""
registration_pdf_parser.py
==========================
Adaptive extraction of renewal inputs from a registration certificate or
TSDR status PDF. Produces the trademark dict consumed by main.py.

Missing fields come back as empty values; nothing here raises on
unrecognised text.
"""

import re

import pdfplumber

from deadline_dates import parse_registration_date


# =========================================================
# 1️⃣ TEXT NORMALIZATION
# =========================================================

def normalize_text(raw_text: str) -> str:
    raw_text = re.sub(r"Page\s+\d+\s+of\s+\d+", "", raw_text, flags=re.I)
    raw_text = re.sub(r"United States Patent.*?Trademark Office", "", raw_text, flags=re.I)
    raw_text = re.sub(r"\n(?=[a-z])", " ", raw_text)
    raw_text = re.sub(r"\n+", "\n", raw_text)
    raw_text = re.sub(r"[ \t]+", " ", raw_text)
    return raw_text.strip()


# =========================================================
# 2️⃣ FLEXIBLE FIELD EXTRACTOR
# =========================================================

def flexible_extract(patterns, text):
    for pattern in patterns:
        match = re.search(pattern, text, re.I | re.M)
        if match:
            return match.group(1).strip()
    return ""


# =========================================================
# 3️⃣ CLASS AND BASIS DETECTION
# =========================================================

def extract_classes(text):
    """International class numbers in order of first appearance, zero-padded."""
    class_patterns = [
        r"International\s+Class(?:es|\(es\))?[: \t]+([\d ,and]+)",
        r"\bInt\.?\s*Cl\.?[: \t]+([\d ,and]+)",
        r"\bIC[: \t]+0*(\d{1,2})\b",
        r"\bClass[: \t]+0*(\d{1,2})\b",
    ]

    found = []
    for pattern in class_patterns:
        for match in re.findall(pattern, text, re.I):
            for number in re.findall(r"\d+", match):
                value = int(number)
                if 1 <= value <= 45 and f"{value:03d}" not in found:
                    found.append(f"{value:03d}")
        if found:
            break

    return found


FOREIGN_BASIS_PATTERNS = [
    r"\b66\s*\(\s*a\s*\)",
    r"Madrid\s+Protocol",
    r"\b44\s*\(\s*e\s*\)",
    r"International\s+Registration\s+(?:Number|No\.?)",
]


def detect_foreign_basis(text: str) -> bool:
    return any(re.search(p, text, re.I) for p in FOREIGN_BASIS_PATTERNS)


# =========================================================
# 4️⃣ ADAPTIVE TEXT PARSER
# =========================================================

def parse_registration_text(raw_text: str) -> dict:
    cleaned_text = normalize_text(raw_text)

    serial_number = flexible_extract([
        r"Serial\s+(?:Number|No\.?)[: \t]+([\d/,]+)",
        r"\bSN[: \t]+([\d/,]+)"
    ], cleaned_text)

    registration_number = flexible_extract([
        r"Registration\s+(?:Number|No\.?)[: \t]+([\d,]+)",
        r"\bReg\.\s*No\.?[: \t]+([\d,]+)"
    ], cleaned_text)

    mark_literal = flexible_extract([
        r"^Mark[: \t]+([A-Z0-9\-\& ]+)$",
        r"Literal\s+Element[: \t]+(.+)$"
    ], cleaned_text)

    owner_name = flexible_extract([
        r"^Owner[: \t]+(.+)$",
        r"^Registrant[: \t]+(.+)$"
    ], cleaned_text)

    registration_date_text = flexible_extract([
        r"Registration\s+Date[: \t]+(.*?\d{4}(?:-\d{2}-\d{2}|\d{4})?)",
        r"\bRegistered[: \t]+(.*?\d{4}(?:-\d{2}-\d{2}|\d{4})?)",
        r"\bReg\.\s*Date[: \t]+(.*?\d{4}(?:-\d{2}-\d{2}|\d{4})?)"
    ], cleaned_text)
    registration_date = parse_registration_date(registration_date_text)

    return {
        "serial_number": re.sub(r"[/,]", "", serial_number),
        "registration_number": registration_number.replace(",", ""),
        "mark_text": mark_literal,
        "owner_name": owner_name,
        "registration_date": registration_date.isoformat() if registration_date else "",
        "classes": extract_classes(cleaned_text),
        "is_foreign_based": detect_foreign_basis(cleaned_text),
    }


def parse_registration_pdf(uploaded_file) -> dict:
    raw_text = ""

    with pdfplumber.open(uploaded_file) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                raw_text += page_text + "\n"

    return parse_registration_text(raw_text)
