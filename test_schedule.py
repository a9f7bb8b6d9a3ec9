"""
Test jadwal amalan: tanggal Hijriah, kunci periode, jatuh tempo, pengingat
"""

from datetime import date

from ibadah.habits.hijri import gregorian_to_hijri, julian_day_number
from ibadah.habits.schedule import (
    compute_streak,
    is_due_this_period,
    is_reminder_scheduled_for_today,
    iso_week,
    period_key,
    previous_period_key,
    weekday,
)
from schemas import Habit, HabitFrequency, Schedule

SENIN = date(2024, 3, 11)
SELASA = date(2024, 3, 12)


def _habit(freq, **schedule):
    return Habit(id="h1", names={"id": "Amalan"}, freq=freq, schedule=Schedule(**schedule))


class TestHijri:

    def test_julian_day_number(self):
        assert julian_day_number(date(2000, 1, 1)) == 2451545

    def test_awal_ramadhan_1445(self):
        assert gregorian_to_hijri(SENIN) == (1445, 9, 1)

    def test_pertengahan_ramadhan(self):
        assert gregorian_to_hijri(date(2024, 3, 23)) == (1445, 9, 13)

    def test_hari_arafah_1445(self):
        hijri = gregorian_to_hijri(date(2024, 6, 16))
        assert (hijri.year, hijri.month, hijri.day) == (1445, 12, 9)


class TestPeriodKey:

    def test_hari_dalam_pekan_mulai_ahad(self):
        assert weekday(date(2024, 3, 10)) == 0
        assert weekday(SENIN) == 1
        assert weekday(date(2024, 3, 16)) == 6

    def test_pekan_iso(self):
        assert iso_week(SENIN) == "2024-W11"
        assert iso_week(date(2021, 1, 3)) == "2020-W53"

    def test_kunci_per_frekuensi(self):
        assert period_key(_habit(HabitFrequency.DAILY), SENIN) == "2024-03-11"
        assert period_key(_habit(HabitFrequency.WEEKLY), SENIN) == "2024-W11"
        assert period_key(_habit(HabitFrequency.MONTHLY), SENIN) == "2024-03"
        assert period_key(_habit(HabitFrequency.YEARLY), SENIN) == "2024"
        assert period_key(_habit(HabitFrequency.SPECIAL), SENIN) == "2024-03-11"


class TestJatuhTempo:

    def test_harian_selalu(self):
        assert is_due_this_period(_habit(HabitFrequency.DAILY), SENIN)

    def test_puasa_senin(self):
        habit = _habit(HabitFrequency.WEEKLY, dow=[1, 4])
        assert is_due_this_period(habit, SENIN)
        assert not is_due_this_period(habit, SELASA)

    def test_pekanan_tanpa_hari_berarti_setiap_hari(self):
        assert is_due_this_period(_habit(HabitFrequency.WEEKLY), SELASA)

    def test_bulanan_masehi(self):
        habit = _habit(HabitFrequency.MONTHLY, dom=[11])
        assert is_due_this_period(habit, SENIN)
        assert not is_due_this_period(habit, SELASA)

    def test_ayyamul_bidh(self):
        habit = _habit(HabitFrequency.MONTHLY, use_hijri=True, hdom=[13, 14, 15])
        assert is_due_this_period(habit, date(2024, 3, 23))
        assert not is_due_this_period(habit, date(2024, 3, 22))

    def test_puasa_arafah(self):
        habit = _habit(HabitFrequency.YEARLY, use_hijri=True, hmonth=12, hmdom=[9])
        assert is_due_this_period(habit, date(2024, 6, 16))
        assert not is_due_this_period(habit, date(2024, 6, 15))

    def test_tahunan_masehi(self):
        habit = _habit(HabitFrequency.YEARLY, month=3, mdom=[11])
        assert is_due_this_period(habit, SENIN)
        assert not is_due_this_period(habit, date(2024, 4, 11))

    def test_tanggal_khusus(self):
        habit = _habit(HabitFrequency.SPECIAL, dates=["2024-03-11"])
        assert is_due_this_period(habit, SENIN)
        assert not is_due_this_period(habit, SELASA)


class TestPengingat:

    def test_tanpa_jadwal_pengingat_selalu_aktif(self):
        assert is_reminder_scheduled_for_today(_habit(HabitFrequency.WEEKLY, dow=[1]), SELASA)

    def test_pengingat_pekanan(self):
        habit = _habit(HabitFrequency.WEEKLY, dow=[1], reminder_dow=[0])
        assert is_reminder_scheduled_for_today(habit, date(2024, 3, 10))
        assert not is_reminder_scheduled_for_today(habit, SENIN)

    def test_pengingat_bulanan(self):
        habit = _habit(HabitFrequency.MONTHLY, dom=[13], reminder_dom=[11])
        assert is_reminder_scheduled_for_today(habit, SENIN)
        assert not is_reminder_scheduled_for_today(habit, SELASA)

    def test_pengingat_tahunan(self):
        habit = _habit(HabitFrequency.YEARLY, month=3, mdom=[12], reminder_month=3, reminder_mdom=[11])
        assert is_reminder_scheduled_for_today(habit, SENIN)
        assert not is_reminder_scheduled_for_today(habit, date(2024, 4, 11))

    def test_tanggal_khusus_selalu_diingatkan(self):
        assert is_reminder_scheduled_for_today(_habit(HabitFrequency.SPECIAL, dates=["2025-01-01"]), SENIN)


class TestStreak:

    def test_kunci_periode_sebelumnya(self):
        assert previous_period_key(_habit(HabitFrequency.DAILY), "2024-03-01") == "2024-02-29"
        assert previous_period_key(_habit(HabitFrequency.WEEKLY), "2024-W11") == "2024-W10"
        assert previous_period_key(_habit(HabitFrequency.WEEKLY), "2021-W01") == "2020-W53"
        assert previous_period_key(_habit(HabitFrequency.WEEKLY), "2024-W01") == "2023-W52"
        assert previous_period_key(_habit(HabitFrequency.MONTHLY), "2024-01") == "2023-12"
        assert previous_period_key(_habit(HabitFrequency.YEARLY), "2024") == "2023"
        assert previous_period_key(_habit(HabitFrequency.SPECIAL), "2024-03-11") is None
        assert previous_period_key(_habit(HabitFrequency.DAILY), "bukan-tanggal") is None

    def test_selesai_hari_ini(self):
        habit = _habit(HabitFrequency.DAILY)
        completions = {"2024-03-09": True, "2024-03-10": True, "2024-03-11": True}
        streak = compute_streak(habit, completions, SENIN)
        assert (streak.current, streak.best, streak.last) == (3, 3, "2024-03-11")

    def test_hanya_selesai_periode_sebelumnya(self):
        habit = _habit(HabitFrequency.DAILY)
        streak = compute_streak(habit, {"2024-03-09": True, "2024-03-10": True}, SENIN)
        assert streak.current == 2
        assert streak.last == "2024-03-10"

    def test_jeda_mereset_streak(self):
        habit = _habit(HabitFrequency.DAILY)
        streak = compute_streak(habit, {"2024-03-08": True, "2024-03-09": True}, SENIN, best=5)
        assert streak.current == 0
        assert streak.best == 5
        assert streak.last == "2024-03-09"

    def test_belum_selesai_tidak_dihitung(self):
        habit = _habit(HabitFrequency.DAILY)
        streak = compute_streak(habit, {"2024-03-10": False, "2024-03-11": True}, SENIN)
        assert streak.current == 1
        assert streak.last == "2024-03-11"

    def test_pekanan_melewati_tahun(self):
        habit = _habit(HabitFrequency.WEEKLY, dow=[1])
        completions = {"2021-W01": True, "2020-W53": True, "2020-W52": True}
        assert compute_streak(habit, completions, date(2021, 1, 4)).current == 3

    def test_bulanan_januari_ke_desember(self):
        habit = _habit(HabitFrequency.MONTHLY)
        completions = {"2023-11": True, "2023-12": True}
        streak = compute_streak(habit, completions, date(2024, 1, 20), best=1)
        assert (streak.current, streak.best, streak.last) == (2, 2, "2023-12")

    def test_tanpa_catatan(self):
        streak = compute_streak(_habit(HabitFrequency.YEARLY), {}, SENIN)
        assert (streak.current, streak.best, streak.last) == (0, 0, "")
