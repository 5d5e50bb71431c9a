from datetime import date, timedelta

import pytest

from renewal_deadlines import DeadlineInfo, DeadlineType
from settings import get_settings


TODAY = date(2024, 1, 1)


def make_deadline(days_remaining: int, deadline_type=DeadlineType.RENEWAL,
                  today: date = TODAY) -> DeadlineInfo:
    """DeadlineInfo whose date sits ``days_remaining`` days after ``today``."""
    return DeadlineInfo(
        date=today + timedelta(days=days_remaining),
        days_remaining=days_remaining,
        deadline_type=deadline_type,
    )


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def sample_trademark() -> dict:
    return {
        "serial_number": "86123456",
        "registration_number": "4712345",
        "mark_text": "NEXAFLOW",
        "owner_name": "TechVista Solutions Inc.",
        "registration_date": "2015-03-01",
        "classes": ["009", "042"],
        "is_foreign_based": False,
    }


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from the developer's environment and .env file."""
    for name in ("RENEWAL_REMINDER_OFFSETS", "DEFAULT_RENEWAL_TYPE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("settings.load_dotenv", lambda *a, **k: False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
