# calculator.py

from __future__ import annotations
import logging
from fractions import Fraction
from typing import Dict, List, Mapping, Optional, Tuple

from schemas import (
    CalculationError,
    CalculationResult,
    CalculationWarning,
    ErrorCode,
    EstateInput,
    FurudhItem,
    HeirShare,
    ShareReason,
    WarningCode,
)
from ibadah.math.netting import net_estate as _net_estate
from ibadah.math.share import (
    ROUNDING_TOLERANCE,
    amount_of,
    fraction_text,
    normalization_divisor,
)
from ibadah.rules.asabah import RESIDUARY_TEXT, distribute_residue
from ibadah.rules.catalog import HeirCategory as H, share_key_order
from ibadah.rules.engine import determine_furudh
from ibadah.rules.hajb import get_blocked_heirs, sorted_blocked

logger = logging.getLogger(__name__)

MAX_HUSBANDS = 1
MAX_WIVES = 4

# --------------------------
# Validasi input
# --------------------------
def _normalize_heirs(heirs: Mapping) -> Tuple[Dict[H, int], List[CalculationError]]:
    """Ubah kunci ke HeirCategory dan periksa jumlah (bilangan bulat ≥ 0)."""
    counts: Dict[H, int] = {}
    errors: List[CalculationError] = []
    for key, count in heirs.items():
        try:
            category = H(key)
        except ValueError:
            errors.append(CalculationError(code=ErrorCode.UNKNOWN_HEIR, field=str(key)))
            continue
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            errors.append(CalculationError(code=ErrorCode.INVALID_HEIR_COUNT, field=category.value))
            continue
        counts[category] = count
    return counts, errors


def _spouse_error(counts: Mapping[H, int]) -> Optional[CalculationError]:
    husbands = counts.get(H.HUSBAND, 0)
    wives = counts.get(H.WIFE, 0)
    if husbands > 0 and wives > 0:
        return CalculationError(code=ErrorCode.INVALID_SPOUSE_COMBINATION)
    if husbands > MAX_HUSBANDS:
        return CalculationError(code=ErrorCode.TOO_MANY_HUSBANDS, field=H.HUSBAND.value)
    if wives > MAX_WIVES:
        return CalculationError(code=ErrorCode.TOO_MANY_WIVES, field=H.WIFE.value)
    return None


def _failed(net_estate: float, errors: List[CalculationError], blocked=(), notes=None) -> CalculationResult:
    return CalculationResult(
        net_estate=net_estate,
        total_share="0",
        errors=errors,
        blocked=sorted_blocked(blocked),
        notes=notes or [],
    )

# --------------------------
# Gabungkan furūḍ dan ashobah
# --------------------------
def _merge_residue(fixed: List[FurudhItem], residue: List[FurudhItem]) -> List[FurudhItem]:
    """
    Ashobah yang sudah punya furūḍ (Ayah bersama anak perempuan) mendapat
    1/6 + sisa dalam satu item; sisanya ditambahkan apa adanya.
    """
    merged = {item.heir: item for item in fixed}
    for item in residue:
        existing = merged.get(item.heir)
        if existing is None:
            merged[item.heir] = item
            continue
        total = existing.share + item.share
        merged[item.heir] = existing.model_copy(update={
            "fraction": f"{existing.fraction} + {RESIDUARY_TEXT}",
            "numerator": total.numerator,
            "denominator": total.denominator,
            "reason": ShareReason.FURUDH_ASABAH,
            "note": f"{existing.note}; {item.note}",
        })
    return sorted(merged.values(), key=lambda f: share_key_order(f.heir))

# ============================================================
#                    FUNGSI UTAMA
# ============================================================
def calculate(net_estate: float, heirs: Mapping) -> CalculationResult:
    """
    Pembagian waris dari harta bersih dan jumlah ahli waris per kategori.

    Urutan tetap: validasi → hajb → furūḍ → ashobah → susun hasil.
    Kesalahan struktural dikembalikan di `errors` dengan distribusi kosong,
    tidak pernah dilempar sebagai exception.
    """
    notes: List[str] = []

    counts, errors = _normalize_heirs(heirs)
    if errors:
        return _failed(net_estate, errors)
    if net_estate < 0:
        return _failed(net_estate, [CalculationError(code=ErrorCode.NEGATIVE_INPUT, field="net_estate")])
    spouse_error = _spouse_error(counts)
    if spouse_error is not None:
        logger.info("Rejected heir set: %s", spouse_error.code.value)
        return _failed(net_estate, [spouse_error])

    # 1) Hajb
    blocked = get_blocked_heirs(counts)
    eligible = {c: n for c, n in counts.items() if n > 0 and c not in blocked}
    for category in sorted_blocked(blocked):
        if counts.get(category, 0) > 0:
            notes.append(f"{category.value} mahjūb (terhalang).")
    if not eligible:
        return _failed(net_estate, [CalculationError(code=ErrorCode.NO_VALID_HEIRS)], blocked, notes)

    # 2) Furūḍ
    notes.append("Menentukan furūḍ ahli waris sesuai ketentuan syar'i")
    fixed, facts = determine_furudh(eligible)
    notes.extend(f.note for f in fixed)
    if facts.is_umariyyatayn:
        notes.append("Kasus 'Umariyyatain: Ibu mengambil 1/3 dari sisa setelah pasangan.")
    total_share = sum((f.share for f in fixed), Fraction(0))

    # 3) Ashobah
    remainder = 1 - total_share
    residue = distribute_residue(remainder, eligible)
    if residue:
        notes.extend(f.note for f in residue)
        total_share = Fraction(1)
    elif remainder > 0:
        notes.append(f"Sisa {fraction_text(remainder)} tanpa Ashobah tidak dibagikan (Radd belum diterapkan).")
    elif remainder < 0:
        notes.append(f"Total furūḍ {fraction_text(total_share)} > 1: semua bagian dinormalisasi.")

    # 4) Nominal akhir
    divisor = normalization_divisor(total_share)
    distribution: List[HeirShare] = []
    for f in _merge_residue(fixed, residue):
        if f.share == 0:
            continue
        distribution.append(HeirShare(
            heir=f.heir,
            quantity=f.quantity,
            share_fraction=f.fraction,
            exact_share=fraction_text(f.share),
            reason=f.reason,
            share_amount=amount_of(f.share, net_estate, divisor),
        ))

    warnings: List[CalculationWarning] = []
    leftover = net_estate - sum(s.share_amount for s in distribution)
    if abs(leftover) > ROUNDING_TOLERANCE:
        warnings.append(CalculationWarning(code=WarningCode.ROUNDING, amount=round(leftover, 2)))

    logger.debug("Calculated %d shares (total %s, leftover %.2f)",
                 len(distribution), fraction_text(total_share), leftover)

    return CalculationResult(
        net_estate=net_estate,
        total_share=fraction_text(total_share),
        distribution=distribution,
        warnings=warnings,
        blocked=sorted_blocked(blocked),
        notes=notes,
    )


def distribute_estate(estate: EstateInput, heirs: Mapping) -> CalculationResult:
    """Netting harta lalu pembagian; peringatan netting ditaruh di depan."""
    netting = _net_estate(
        estate.gross,
        estate.asset_debt,
        estate.non_asset_debt,
        estate.funeral,
        estate.bequest,
    )
    if netting.errors:
        return CalculationResult(
            net_estate=netting.net_estate,
            total_share="0",
            errors=netting.errors,
            warnings=netting.warnings,
        )

    result = calculate(netting.net_estate, heirs)
    return result.model_copy(update={
        "warnings": netting.warnings + result.warnings,
        "notes": [
            f"Harta bersih = {estate.gross:,.2f} - {netting.liabilities:,.2f} - wasiat {netting.applied_bequest:,.2f}"
            f" = {netting.net_estate:,.2f}",
        ] + result.notes,
    })
