from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo


def native_weekday(d: date) -> int:
    """Índice do dia no formato nativo do banco/cliente: 0=domingo ... 6=sábado."""
    return d.isoweekday() % 7


def monday_first_index(native: int) -> int:
    """0=domingo..6=sábado -> 0=segunda..6=domingo."""
    if not 0 <= native <= 6:
        raise ValueError(f"dia da semana fora do intervalo 0-6: {native}")
    return 6 if native == 0 else native - 1


def week_bounds(today: datetime) -> tuple[datetime, datetime]:
    """
    Segunda 00:00:00 até domingo 23:59:59.999999 da semana de `today`,
    na mesma TZ de `today`.
    """
    offset = monday_first_index(native_weekday(today.date()))
    monday = today.date() - timedelta(days=offset)
    start = datetime.combine(monday, time.min, tzinfo=today.tzinfo)
    end = datetime.combine(monday + timedelta(days=6), time.max, tzinfo=today.tzinfo)
    return start, end


def as_local(dt_value: datetime, tz: ZoneInfo) -> datetime:
    # naive vem do SQLite: assume que já está na TZ local
    if dt_value.tzinfo is None:
        return dt_value.replace(tzinfo=tz)
    return dt_value.astimezone(tz)


def trained_days(
    timestamps: Iterable[datetime], today: datetime, include_today: bool = True
) -> list[int]:
    """
    Dias (segunda-primeiro) da semana corrente com treino concluído.
    include_today=False ignora os treinos de hoje (semana até ontem).
    """
    tz = today.tzinfo or ZoneInfo("UTC")
    start, end = week_bounds(today)
    days: set[int] = set()
    for ts in timestamps:
        local = as_local(ts, tz)
        if not start <= local <= end:
            continue
        if not include_today and local.date() == today.date():
            continue
        days.add(monday_first_index(native_weekday(local.date())))
    return sorted(days)
