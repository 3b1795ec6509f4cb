from datetime import date, timedelta

DATE_EPOCH = date(1900, 1, 1)


def cm_to_m(v: int) -> float:
    return v / 100.0

def m_to_cm(v: float) -> int:
    return int(round(v * 100.0))

def days_to_date(days: int) -> date:
    """Survey dates count days from 1900-01-01."""
    return DATE_EPOCH + timedelta(days=days)

def date_to_days(d: date) -> int:
    return (d - DATE_EPOCH).days
