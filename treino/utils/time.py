from __future__ import annotations

from datetime import date, datetime, time, timedelta


def fmt_hhmm(t: time) -> str:
    return f"{t.hour:02d}:{t.minute:02d}"


def add_minutes(t: time, minutes: int) -> time:
    # data de referência fixa; o resultado pode "virar" para o dia seguinte
    ref = datetime.combine(date(2000, 1, 1), t) + timedelta(minutes=minutes)
    return ref.time()
