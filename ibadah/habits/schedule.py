# ibadah/habits/schedule.py

from datetime import date, timedelta
from typing import Mapping, Optional

from schemas import Habit, HabitFrequency as F, Streak
from .hijri import gregorian_to_hijri


def weekday(d: date) -> int:
    """Hari dalam pekan dengan 0 = Ahad, 6 = Sabtu."""
    return d.isoweekday() % 7


def iso_week(d: date) -> str:
    year, week, _ = d.isocalendar()
    return f"{year}-W{week:02d}"


def period_key(habit: Habit, d: date) -> str:
    """Kunci periode untuk mencatat penyelesaian amalan."""
    if habit.freq == F.WEEKLY:
        return iso_week(d)
    if habit.freq == F.MONTHLY:
        return f"{d.year}-{d.month:02d}"
    if habit.freq == F.YEARLY:
        return str(d.year)
    return d.isoformat()


def is_due_this_period(habit: Habit, d: date) -> bool:
    """
    Apakah amalan jatuh tempo pada tanggal `d`.
    Daftar kosong berarti tidak dibatasi (setiap hari pada periodenya).
    """
    s = habit.schedule
    if habit.freq == F.DAILY:
        return True
    if habit.freq == F.WEEKLY:
        return not s.dow or weekday(d) in s.dow
    if habit.freq == F.MONTHLY:
        if s.use_hijri:
            return not s.hdom or gregorian_to_hijri(d).day in s.hdom
        return not s.dom or d.day in s.dom
    if habit.freq == F.YEARLY:
        if s.use_hijri:
            if not s.hmonth and not s.hmdom:
                return True
            hijri = gregorian_to_hijri(d)
            return hijri.month == s.hmonth and (not s.hmdom or hijri.day in s.hmdom)
        if not s.month and not s.mdom:
            return True
        return d.month == s.month and (not s.mdom or d.day in s.mdom)
    if habit.freq == F.SPECIAL:
        return not s.dates or d.isoformat() in s.dates
    return False


def is_reminder_scheduled_for_today(habit: Habit, d: date) -> bool:
    s = habit.schedule
    # tanggal khusus: pengingat pada tanggal itu sendiri
    if habit.freq == F.SPECIAL:
        return True
    if not s.reminder_dow and not s.reminder_dom and not s.reminder_mdom:
        return True

    if habit.freq in (F.DAILY, F.WEEKLY):
        return weekday(d) in s.reminder_dow
    if habit.freq == F.MONTHLY:
        return d.day in s.reminder_dom
    if habit.freq == F.YEARLY:
        return s.reminder_month == d.month and d.day in s.reminder_mdom
    return False


def previous_period_key(habit: Habit, key: str) -> Optional[str]:
    """Kunci periode sebelum `key`; None untuk tanggal khusus atau kunci rusak."""
    try:
        if habit.freq == F.DAILY:
            return (date.fromisoformat(key) - timedelta(days=1)).isoformat()
        if habit.freq == F.WEEKLY:
            year, week = (int(part) for part in key.split("-W"))
            if week > 1:
                return f"{year}-W{week - 1:02d}"
            # 28 Desember selalu berada di pekan ISO terakhir tahunnya
            return iso_week(date(year - 1, 12, 28))
        if habit.freq == F.MONTHLY:
            year, month = (int(part) for part in key.split("-"))
            if month > 1:
                return f"{year}-{month - 1:02d}"
            return f"{year - 1}-12"
        if habit.freq == F.YEARLY:
            return str(int(key) - 1)
    except (ValueError, OverflowError):
        return None
    return None


def compute_streak(habit: Habit, completions: Mapping[str, bool], today: date,
                   best: int = 0) -> Streak:
    """
    Hitung ulang streak dari catatan penyelesaian per kunci periode.

    Bila periode ini belum selesai, hitungan dimulai dari periode sebelumnya
    sehingga streak tidak putus sebelum periode berjalan berakhir.
    """
    def done(key: Optional[str]) -> bool:
        return key is not None and bool(completions.get(key))

    key: Optional[str] = period_key(habit, today)
    if not done(key):
        key = previous_period_key(habit, key)

    current = 0
    while done(key):
        current += 1
        key = previous_period_key(habit, key)

    completed = sorted(k for k, v in completions.items() if v)
    return Streak(
        current=current,
        best=max(best, current),
        last=completed[-1] if completed else "",
    )
