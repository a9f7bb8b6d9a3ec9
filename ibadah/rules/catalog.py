# ibadah/rules/catalog.py

from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, NamedTuple, Tuple


class HeirCategory(str, Enum):
    HUSBAND = "husband"
    WIFE = "wife"
    SON = "son"
    DAUGHTER = "daughter"
    FATHER = "father"
    MOTHER = "mother"
    GRANDSON_FROM_SON = "grandson_from_son"
    GRANDDAUGHTER_FROM_SON = "granddaughter_from_son"
    PATERNAL_GRANDFATHER = "paternal_grandfather"
    PATERNAL_GRANDMOTHER = "paternal_grandmother"
    MATERNAL_GRANDMOTHER = "maternal_grandmother"
    FULL_BROTHER = "full_brother"
    FULL_SISTER = "full_sister"
    PATERNAL_BROTHER = "paternal_brother"
    PATERNAL_SISTER = "paternal_sister"
    MATERNAL_BROTHER = "maternal_brother"
    MATERNAL_SISTER = "maternal_sister"
    FULL_NEPHEW = "full_nephew"
    PATERNAL_NEPHEW = "paternal_nephew"
    FULL_PATERNAL_UNCLE = "full_paternal_uncle"
    PATERNAL_UNCLE = "paternal_uncle"
    FULL_PATERNAL_COUSIN = "full_paternal_cousin"
    PATERNAL_COUSIN = "paternal_cousin"
    MALE_EMANCIPATOR = "male_emancipator"
    FEMALE_EMANCIPATOR = "female_emancipator"


class KinshipGroup(str, Enum):
    SPOUSE = "spouse"
    DESCENDANTS = "descendants"
    ASCENDANTS = "ascendants"
    COLLATERALS = "collaterals"
    EMANCIPATOR = "emancipator"


class HeirEntry(NamedTuple):
    id: HeirCategory
    group: KinshipGroup
    name_en: str
    name_ar: str


H = HeirCategory
G = KinshipGroup

# =========================
# Katalog ahli waris (urutan tampilan)
# =========================
HEIR_LIST: Tuple[HeirEntry, ...] = (
    HeirEntry(H.HUSBAND, G.SPOUSE, "Husband", "زوج"),
    HeirEntry(H.WIFE, G.SPOUSE, "Wife", "زوجة"),
    HeirEntry(H.SON, G.DESCENDANTS, "Son", "ابن"),
    HeirEntry(H.DAUGHTER, G.DESCENDANTS, "Daughter", "بنت"),
    HeirEntry(H.FATHER, G.ASCENDANTS, "Father", "أب"),
    HeirEntry(H.MOTHER, G.ASCENDANTS, "Mother", "أم"),
    HeirEntry(H.GRANDSON_FROM_SON, G.DESCENDANTS, "Grandson (son's son)", "ابن ابن"),
    HeirEntry(H.GRANDDAUGHTER_FROM_SON, G.DESCENDANTS, "Granddaughter (son's daughter)", "بنت ابن"),
    HeirEntry(H.PATERNAL_GRANDFATHER, G.ASCENDANTS, "Paternal grandfather", "جد"),
    HeirEntry(H.PATERNAL_GRANDMOTHER, G.ASCENDANTS, "Paternal grandmother", "جدة من الأب"),
    HeirEntry(H.MATERNAL_GRANDMOTHER, G.ASCENDANTS, "Maternal grandmother", "جدة من الأم"),
    HeirEntry(H.FULL_BROTHER, G.COLLATERALS, "Full brother", "أخ لأبوين"),
    HeirEntry(H.FULL_SISTER, G.COLLATERALS, "Full sister", "أخت لأبوين"),
    HeirEntry(H.PATERNAL_BROTHER, G.COLLATERALS, "Paternal half-brother", "أخ لأب"),
    HeirEntry(H.PATERNAL_SISTER, G.COLLATERALS, "Paternal half-sister", "أخت لأب"),
    HeirEntry(H.MATERNAL_BROTHER, G.COLLATERALS, "Maternal half-brother", "أخ لأم"),
    HeirEntry(H.MATERNAL_SISTER, G.COLLATERALS, "Maternal half-sister", "أخت لأم"),
    HeirEntry(H.FULL_NEPHEW, G.COLLATERALS, "Full brother's son", "ابن أخ لأبوين"),
    HeirEntry(H.PATERNAL_NEPHEW, G.COLLATERALS, "Paternal brother's son", "ابن أخ لأب"),
    HeirEntry(H.FULL_PATERNAL_UNCLE, G.COLLATERALS, "Full paternal uncle", "عم لأبوين"),
    HeirEntry(H.PATERNAL_UNCLE, G.COLLATERALS, "Paternal half-uncle", "عم لأب"),
    HeirEntry(H.FULL_PATERNAL_COUSIN, G.COLLATERALS, "Full paternal uncle's son", "ابن عم لأبوين"),
    HeirEntry(H.PATERNAL_COUSIN, G.COLLATERALS, "Paternal half-uncle's son", "ابن عم لأب"),
    HeirEntry(H.MALE_EMANCIPATOR, G.EMANCIPATOR, "Male emancipator", "معتق"),
    HeirEntry(H.FEMALE_EMANCIPATOR, G.EMANCIPATOR, "Female emancipator", "معتقة"),
)

CATALOG_ORDER: Dict[HeirCategory, int] = {e.id: i for i, e in enumerate(HEIR_LIST)}

# =========================
# Pengelompokan bagian bersama (pool)
#   anggota pool menerima satu bagian furudh bersama, dibagi rata per kepala
# =========================
MATERNAL_SIBLINGS = "maternal_siblings"
GRANDMOTHERS = "grandmothers"

SHARE_POOLS = MappingProxyType({
    MATERNAL_SIBLINGS: (H.MATERNAL_BROTHER, H.MATERNAL_SISTER),
    GRANDMOTHERS: (H.PATERNAL_GRANDMOTHER, H.MATERNAL_GRANDMOTHER),
})

_POOL_OF: Dict[HeirCategory, str] = {
    member: pool for pool, members in SHARE_POOLS.items() for member in members
}


def get_heir_list() -> List[HeirEntry]:
    """Katalog statis ahli waris, berurutan. Salinan baru setiap panggilan."""
    return list(HEIR_LIST)


def share_key(category: HeirCategory) -> str:
    """Kunci distribusi: nama pool untuk anggota pool, id kategori untuk lainnya."""
    return _POOL_OF.get(category, category.value)


def share_key_members(key: str) -> Tuple[HeirCategory, ...]:
    if key in SHARE_POOLS:
        return SHARE_POOLS[key]
    return (HeirCategory(key),)


def share_key_order(key: str) -> int:
    # pool diletakkan pada posisi anggota pertamanya
    return min(CATALOG_ORDER[m] for m in share_key_members(key))
