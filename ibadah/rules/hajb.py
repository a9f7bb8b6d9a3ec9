# ibadah/rules/hajb.py

from __future__ import annotations
from types import MappingProxyType
from typing import FrozenSet, Mapping, Set

from .catalog import HeirCategory as H, CATALOG_ORDER

_UNCLES_AND_COUSINS = (
    H.FULL_PATERNAL_UNCLE, H.PATERNAL_UNCLE,
    H.FULL_PATERNAL_COUSIN, H.PATERNAL_COUSIN,
)
_NEPHEWS_UNCLES_COUSINS = (H.FULL_NEPHEW, H.PATERNAL_NEPHEW) + _UNCLES_AND_COUSINS
_SIBLINGS = (
    H.FULL_BROTHER, H.FULL_SISTER,
    H.PATERNAL_BROTHER, H.PATERNAL_SISTER,
    H.MATERNAL_BROTHER, H.MATERNAL_SISTER,
)

# =========================
# Tabel hajb statis: penghalang -> yang terhalang
# =========================
HAJB_RULES: Mapping[H, FrozenSet[H]] = MappingProxyType({
    H.SON: frozenset((H.GRANDSON_FROM_SON, H.GRANDDAUGHTER_FROM_SON) + _SIBLINGS + _NEPHEWS_UNCLES_COUSINS),
    H.FATHER: frozenset((H.PATERNAL_GRANDFATHER,) + _SIBLINGS + _NEPHEWS_UNCLES_COUSINS),
    H.PATERNAL_GRANDFATHER: frozenset(_UNCLES_AND_COUSINS),
    H.GRANDSON_FROM_SON: frozenset(_NEPHEWS_UNCLES_COUSINS),
    H.FULL_BROTHER: frozenset((H.PATERNAL_BROTHER, H.PATERNAL_SISTER) + _NEPHEWS_UNCLES_COUSINS),
    H.PATERNAL_BROTHER: frozenset((H.PATERNAL_NEPHEW,) + _UNCLES_AND_COUSINS),
    H.FULL_NEPHEW: frozenset((H.PATERNAL_NEPHEW,) + _UNCLES_AND_COUSINS),
    H.PATERNAL_NEPHEW: frozenset(_UNCLES_AND_COUSINS),
    H.FULL_PATERNAL_UNCLE: frozenset((H.PATERNAL_UNCLE, H.FULL_PATERNAL_COUSIN, H.PATERNAL_COUSIN)),
    H.PATERNAL_UNCLE: frozenset((H.FULL_PATERNAL_COUSIN, H.PATERNAL_COUSIN)),
})


def _count(heirs: Mapping, category: H) -> int:
    """Jumlah kepala mentah; kunci boleh enum atau string, nilai tidak valid dianggap 0."""
    value = heirs.get(category, heirs.get(category.value, 0))
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def get_blocked_heirs(heirs: Mapping) -> FrozenSet[H]:
    """
    Himpunan kategori yang mahjūb (terhalang) oleh kehadiran kerabat yang lebih dekat.

    Dievaluasi dari kehadiran mentah (jumlah > 0), bukan kehadiran setelah hajb,
    sehingga penghalang yang sendirinya terhalang tetap menghalangi.
    Tidak pernah gagal: kunci asing atau jumlah tidak valid diabaikan.
    """
    present = {c for c in H if _count(heirs, c) > 0}
    blocked: Set[H] = set()

    for blocker in present:
        blocked |= HAJB_RULES.get(blocker, frozenset())

    # Aturan bersyarat, urutan tetap
    if H.FATHER in present:
        blocked.add(H.PATERNAL_GRANDFATHER)
    if H.MOTHER in present:
        blocked.add(H.PATERNAL_GRANDMOTHER)
        blocked.add(H.MATERNAL_GRANDMOTHER)
    if H.PATERNAL_GRANDFATHER in present:
        blocked.add(H.PATERNAL_GRANDMOTHER)
    if _count(heirs, H.DAUGHTER) >= 2 and H.SON not in present:
        blocked.add(H.GRANDDAUGHTER_FROM_SON)

    return frozenset(blocked)


def sorted_blocked(blocked) -> list:
    return sorted(blocked, key=CATALOG_ORDER.__getitem__)
