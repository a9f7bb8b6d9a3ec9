# Di dalam file: schemas.py

from datetime import date
from enum import Enum
from fractions import Fraction
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ibadah.rules.catalog import HeirCategory, KinshipGroup

# --- Skema Ahli Waris (Database) ---
class HeirBase(BaseModel):
    category: HeirCategory
    group: KinshipGroup
    name_en: str   # Nama dalam bahasa Inggris
    name_ar: str   # Nama dalam bahasa Arab

class HeirCreate(HeirBase):
    pass

class Heir(HeirBase):
    id: int
    model_config = ConfigDict(from_attributes=True)

# --- Katalog statis (tanpa database) ---
class CatalogEntry(BaseModel):
    id: HeirCategory
    group: KinshipGroup
    name_en: str
    name_ar: str

# --- Kode kesalahan & peringatan ---
class ErrorCode(str, Enum):
    UNKNOWN_HEIR = "UnknownHeir"
    INVALID_HEIR_COUNT = "InvalidHeirCount"
    INVALID_SPOUSE_COMBINATION = "InvalidSpouseCombination"
    TOO_MANY_HUSBANDS = "TooManyHusbands"
    TOO_MANY_WIVES = "TooManyWives"
    NEGATIVE_INPUT = "NegativeInput"
    LIABILITIES_EXCEED_ESTATE = "LiabilitiesExceedEstate"
    NO_VALID_HEIRS = "NoValidHeirs"

class WarningCode(str, Enum):
    ROUNDING = "RoundingWarning"
    BEQUEST_CAPPED = "BequestCappedWarning"

class ShareReason(str, Enum):
    FURUDH = "Furudh"
    ASABAH = "Asabah"
    FURUDH_ASABAH = "Furudh+Asabah"   # Ayah: 1/6 sekaligus sisa

class CalculationError(BaseModel):
    code: ErrorCode
    field: Optional[str] = None   # nama input yang bermasalah, bila ada
    model_config = ConfigDict(frozen=True)

class CalculationWarning(BaseModel):
    code: WarningCode
    amount: float                 # selisih / kelebihan dalam satuan mata uang
    model_config = ConfigDict(frozen=True)

# --- Item bagian (furudh atau ashabah) sebelum dirupiahkan ---
class FurudhItem(BaseModel):
    heir: str              # id kategori, atau nama pool ("maternal_siblings", "grandmothers")
    quantity: int
    fraction: str          # teks tampilan, misal "1/2" atau "residuary"
    numerator: int
    denominator: int
    reason: ShareReason
    note: str = ""

    @property
    def share(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

# --- Skema Output untuk Setiap Ahli Waris ---
class HeirShare(BaseModel):
    heir: str
    quantity: int
    share_fraction: str        # "1/4", "residuary", "1/6 + residuary"
    exact_share: str           # bagian akhir persis sebelum normalisasi, misal "5/12"
    reason: ShareReason
    share_amount: float        # nominal akhir
    model_config = ConfigDict(frozen=True)

class CalculationResult(BaseModel):
    net_estate: float
    total_share: str           # jumlah bagian sebelum normalisasi ('Aul sederhana)
    distribution: List[HeirShare] = []
    errors: List[CalculationError] = []
    warnings: List[CalculationWarning] = []
    blocked: List[HeirCategory] = []
    notes: List[str] = []
    model_config = ConfigDict(frozen=True)

# --- Skema Harta (tirkah) & pengurangan ---
class EstateInput(BaseModel):
    gross: float                   # harta kotor
    asset_debt: float = 0.0        # utang terkait aset
    non_asset_debt: float = 0.0    # utang lain
    funeral: float = 0.0           # biaya pengurusan jenazah
    bequest: float = 0.0           # wasiat yang diminta

class NettingResult(BaseModel):
    net_estate: float
    applied_bequest: float
    liabilities: float
    errors: List[CalculationError] = []
    warnings: List[CalculationWarning] = []
    model_config = ConfigDict(frozen=True)

# --- Skema Input untuk Kalkulasi ---
class HeirCountInput(BaseModel):
    heirs: Dict[HeirCategory, int] = {}

class CalculationInput(BaseModel):
    estate: EstateInput
    heirs: Dict[HeirCategory, int] = {}

class BlockedResult(BaseModel):
    blocked: List[HeirCategory]

# --- Skema Jadwal Amalan (habit) ---
class HabitFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    SPECIAL = "special"

class Schedule(BaseModel):
    time: str = ""
    dow: List[int] = []            # 0 = Ahad
    dom: List[int] = []
    month: Optional[int] = None
    mdom: List[int] = []
    dates: List[str] = []          # "YYYY-MM-DD"
    use_hijri: bool = False
    hdom: List[int] = []
    hmonth: Optional[int] = None
    hmdom: List[int] = []
    reminder_enabled: bool = False
    reminder_dow: List[int] = []
    reminder_dom: List[int] = []
    reminder_month: Optional[int] = None
    reminder_mdom: List[int] = []

class Habit(BaseModel):
    id: Optional[str] = None
    names: Dict[str, str] = {}
    freq: HabitFrequency
    schedule: Schedule = Field(default_factory=Schedule)

class HabitDueInput(BaseModel):
    habit: Habit
    on: date

class HabitDueResult(BaseModel):
    due: bool
    period_key: str
    reminder_today: bool

class Streak(BaseModel):
    current: int = 0
    best: int = 0
    last: str = ""             # kunci periode penyelesaian terakhir
    model_config = ConfigDict(frozen=True)

class HabitStreakInput(BaseModel):
    habit: Habit
    completions: Dict[str, bool] = {}   # kunci periode -> selesai
    on: date
    best: int = 0                       # rekor sebelumnya
