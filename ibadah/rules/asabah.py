# ibadah/rules/asabah.py

from __future__ import annotations
from fractions import Fraction
from typing import List, Mapping, NamedTuple, Optional, Tuple

from schemas import FurudhItem, ShareReason
from .catalog import HeirCategory as H

RESIDUARY_TEXT = "residuary"


class AsabahTier(NamedTuple):
    """Satu tingkat ashobah: penerima utama (anchor) dan pendamping bil-ghair (opsional)."""
    anchor: H
    anchor_weight: int = 1
    companion: Optional[H] = None
    companion_weight: int = 1


# =========================
# Urutan prioritas ashobah (yang terdekat menghabiskan sisa)
# =========================
ASABAH_TIERS: Tuple[AsabahTier, ...] = (
    AsabahTier(H.SON, 2, H.DAUGHTER, 1),
    AsabahTier(H.GRANDSON_FROM_SON, 2, H.GRANDDAUGHTER_FROM_SON, 1),
    AsabahTier(H.FATHER),
    AsabahTier(H.PATERNAL_GRANDFATHER),
    AsabahTier(H.FULL_BROTHER, 2, H.FULL_SISTER, 1),
    AsabahTier(H.PATERNAL_BROTHER, 2, H.PATERNAL_SISTER, 1),
    AsabahTier(H.FULL_NEPHEW),
    AsabahTier(H.PATERNAL_NEPHEW),
    AsabahTier(H.FULL_PATERNAL_UNCLE),
    AsabahTier(H.PATERNAL_UNCLE),
    AsabahTier(H.FULL_PATERNAL_COUSIN),
    AsabahTier(H.PATERNAL_COUSIN),
    AsabahTier(H.MALE_EMANCIPATOR),
    AsabahTier(H.FEMALE_EMANCIPATOR),
)


def residuary_tier(heirs: Mapping[H, int]) -> Optional[AsabahTier]:
    """Tingkat ashobah terdekat yang penerima utamanya hadir."""
    for tier in ASABAH_TIERS:
        if heirs.get(tier.anchor, 0) > 0:
            return tier
    return None


def distribute_residue(remainder: Fraction, heirs: Mapping[H, int]) -> List[FurudhItem]:
    """
    Bagi sisa (1 - Σ furūḍ) kepada tingkat ashobah terdekat, proporsional w × n.

    Sisa ≤ 0 berarti harta habis oleh furūḍ; tidak ada yang dibagi.
    Tanpa ashobah sama sekali sisa dibiarkan (Radd belum diterapkan).
    """
    if remainder <= 0:
        return []
    tier = residuary_tier(heirs)
    if tier is None:
        return []

    members = [(tier.anchor, tier.anchor_weight, heirs[tier.anchor])]
    if tier.companion is not None and heirs.get(tier.companion, 0) > 0:
        members.append((tier.companion, tier.companion_weight, heirs[tier.companion]))

    total_bobot = sum(w * n for _, w, n in members)
    items: List[FurudhItem] = []
    for category, w, n in members:
        share = Fraction(w * n, total_bobot) * remainder
        if len(members) == 1:
            note = f"{category.value} mendapat seluruh sisa sebagai Ashobah"
        else:
            note = f"{category.value} ({n} orang, bobot {w}) mendapat sisa 2:1 sebagai Ashobah"
        items.append(FurudhItem(
            heir=category.value,
            quantity=n,
            fraction=RESIDUARY_TEXT,
            numerator=share.numerator,
            denominator=share.denominator,
            reason=ShareReason.ASABAH,
            note=note,
        ))
    return items
