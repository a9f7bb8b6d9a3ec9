# ibadah/habits/hijri.py

from datetime import date
from typing import NamedTuple

# selisih antara date.toordinal() dan Julian Day Number
_JDN_OFFSET = 1721425


class HijriDate(NamedTuple):
    year: int
    month: int
    day: int


def julian_day_number(d: date) -> int:
    return d.toordinal() + _JDN_OFFSET


def gregorian_to_hijri(d: date) -> HijriDate:
    """
    Konversi Masehi → Hijriah dengan kalender aritmetika (algoritma Kuwaiti).
    Bisa berbeda satu hari dari rukyat / Umm al-Qura.
    """
    jd = julian_day_number(d)
    l = jd - 1948440 + 10632
    n = (l - 1) // 10631
    i = l - 10631 * n + 354
    j = ((10985 - i) // 5316) * ((50 * i) // 17719) + (i // 5670) * ((43 * i) // 15238)
    k = i - ((30 - j) // 15) * ((17719 * j) // 50) - (j // 16) * ((15238 * j) // 43) + 29
    month = (24 * k) // 709
    day = k - (709 * month) // 24
    year = 30 * n + j - 30
    return HijriDate(year, month, day)
