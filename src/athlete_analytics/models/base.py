from datetime import UTC, date, datetime


def utc_now() -> datetime:
    """Return current UTC time as naive datetime.

    Database columns use TIMESTAMP WITHOUT TIME ZONE, so we strip tzinfo.
    All times are stored in UTC by convention.
    """
    return datetime.now(UTC).replace(tzinfo=None)


def age_on(date_of_birth: date | None, today: date | None = None) -> int | None:
    """Whole years between ``date_of_birth`` and ``today``."""
    if date_of_birth is None:
        return None
    today = today or utc_now().date()
    years = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        years -= 1
    return years
