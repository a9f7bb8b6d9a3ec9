# ibadah/rules/engine.py

from __future__ import annotations
from fractions import Fraction
from typing import List, Mapping, NamedTuple, Tuple

from schemas import FurudhItem, ShareReason
from .catalog import HeirCategory as H, MATERNAL_SIBLINGS, GRANDMOTHERS

# =========================
# Util kuantitas & eksistensi
# =========================
def _q(heirs: Mapping[H, int], target: H) -> int:
    return heirs.get(target, 0)

def _exists(heirs: Mapping[H, int], target: H) -> bool:
    return _q(heirs, target) > 0


# =========================
# Helper buat FurudhItem
# =========================
def _fi(key: str, quantity: int, share: Fraction, note: str, text: str = "") -> FurudhItem:
    return FurudhItem(
        heir=key,
        quantity=quantity,
        fraction=text or f"{share.numerator}/{share.denominator}",
        numerator=share.numerator,
        denominator=share.denominator,
        reason=ShareReason.FURUDH,
        note=note,
    )


class FurudhFacts(NamedTuple):
    has_descendant: bool
    has_multiple_siblings: bool
    is_umariyyatayn: bool


# =========================
# Predikat
# =========================
def has_descendant(heirs: Mapping[H, int]) -> bool:
    return any(_exists(heirs, c) for c in (
        H.SON, H.DAUGHTER, H.GRANDSON_FROM_SON, H.GRANDDAUGHTER_FROM_SON,
    ))

def has_male_descendant(heirs: Mapping[H, int]) -> bool:
    return _exists(heirs, H.SON) or _exists(heirs, H.GRANDSON_FROM_SON)

def has_multiple_siblings(heirs: Mapping[H, int]) -> bool:
    total = sum(_q(heirs, c) for c in (
        H.FULL_BROTHER, H.FULL_SISTER,
        H.PATERNAL_BROTHER, H.PATERNAL_SISTER,
        H.MATERNAL_BROTHER, H.MATERNAL_SISTER,
    ))
    return total >= 2

def is_umariyyatayn(heirs: Mapping[H, int]) -> bool:
    """Gharrawain: tepat satu pihak pasangan + ayah + ibu, tanpa ahli waris lain."""
    present = {c for c, n in heirs.items() if n > 0}
    has_spouse = H.HUSBAND in present or H.WIFE in present
    return has_spouse and {H.FATHER, H.MOTHER} <= present and len(present) == 3


# =========================
# Mesin penentu furūḍ
# =========================
def determine_furudh(heirs: Mapping[H, int]) -> Tuple[List[FurudhItem], FurudhFacts]:
    """
    Menghasilkan daftar FurudhItem (bagian tetap) dari ahli waris yang sudah lolos hajb.

    Catatan:
      - Ashobah (sisa) tidak ditentukan di sini; lihat asabah.py.
      - Furūḍ bersama (2/3, 1/3 saudara seibu, 1/6 nenek) satu item per golongan,
        dibagi rata per kepala oleh pemanggil.
      - Saudari sebagai ashobah ma'a al-ghair bersama anak perempuan belum didukung.
      - Di luar tabel furūḍ dasar (pasangan, ibu, ayah, kakek, saudara seibu,
        anak perempuan) ditambahkan: nenek 1/6, cucu perempuan 1/2, 2/3 atau 1/6,
        saudari kandung 1/2 atau 2/3, saudari seayah 1/2, 2/3 atau 1/6.
        Tanpa tambahan ini bagian mereka tertinggal sebagai sisa tak terbagi.
    """
    items: List[FurudhItem] = []

    q = lambda k: _q(heirs, k)
    descendant = has_descendant(heirs)
    male_descendant = has_male_descendant(heirs)
    multiple_siblings = has_multiple_siblings(heirs)
    umari = is_umariyyatayn(heirs)

    # -----------------------
    # 1) Suami / Istri
    # -----------------------
    spouse_share = Fraction(0)
    if q(H.HUSBAND) > 0:
        spouse_share = Fraction(1, 4) if descendant else Fraction(1, 2)
        items.append(_fi(H.HUSBAND.value, q(H.HUSBAND), spouse_share,
                         "Suami mendapat 1/4 karena pewaris punya keturunan" if descendant
                         else "Suami mendapat 1/2 karena pewaris tidak punya keturunan"))

    if q(H.WIFE) > 0:
        spouse_share = Fraction(1, 8) if descendant else Fraction(1, 4)
        items.append(_fi(H.WIFE.value, q(H.WIFE), spouse_share,
                         "Istri mendapat 1/8 karena pewaris punya keturunan" if descendant
                         else "Istri mendapat 1/4 karena pewaris tidak punya keturunan"))

    # -----------------------
    # 2) Ibu
    # -----------------------
    if q(H.MOTHER) > 0:
        if umari:
            # 'Umariyyatain: 1/3 dari sisa setelah bagian pasangan
            items.append(_fi(H.MOTHER.value, q(H.MOTHER), (1 - spouse_share) / 3,
                             "Ibu mendapat 1/3 sisa setelah bagian pasangan ('Umariyyatain)",
                             text="1/3"))
        elif descendant or multiple_siblings:
            items.append(_fi(H.MOTHER.value, q(H.MOTHER), Fraction(1, 6),
                             "Ibu mendapat 1/6 karena ada keturunan atau ≥2 saudara"))
        else:
            items.append(_fi(H.MOTHER.value, q(H.MOTHER), Fraction(1, 3),
                             "Ibu mendapat 1/3 karena tanpa keturunan & <2 saudara"))

    # -----------------------
    # 3) Ayah / Kakek
    #     tanpa keturunan sama sekali → murni ashobah (asabah.py)
    # -----------------------
    if q(H.FATHER) > 0:
        if male_descendant:
            items.append(_fi(H.FATHER.value, q(H.FATHER), Fraction(1, 6),
                             "Ayah mendapat 1/6 karena ada keturunan laki-laki"))
        elif descendant:
            items.append(_fi(H.FATHER.value, q(H.FATHER), Fraction(1, 6),
                             "Ayah mendapat 1/6 karena ada keturunan perempuan; sisanya sebagai Ashobah"))

    if q(H.PATERNAL_GRANDFATHER) > 0 and male_descendant:
        items.append(_fi(H.PATERNAL_GRANDFATHER.value, q(H.PATERNAL_GRANDFATHER), Fraction(1, 6),
                         "Kakek mendapat 1/6 karena ada keturunan laki-laki"))

    # -----------------------
    # 4) Nenek (1/6 bersama)
    # -----------------------
    grandmothers = q(H.PATERNAL_GRANDMOTHER) + q(H.MATERNAL_GRANDMOTHER)
    if grandmothers > 0:
        items.append(_fi(GRANDMOTHERS, grandmothers, Fraction(1, 6),
                         "Nenek mendapat 1/6 (dibagi rata bila lebih dari satu)"))

    # -----------------------
    # 5) Saudara seibu (li-umm) – lintas gender, rata bagi
    # -----------------------
    li_umm = q(H.MATERNAL_BROTHER) + q(H.MATERNAL_SISTER)
    if li_umm == 1:
        items.append(_fi(MATERNAL_SIBLINGS, 1, Fraction(1, 6),
                         "Saudara seibu (1 orang) mendapat 1/6"))
    elif li_umm >= 2:
        items.append(_fi(MATERNAL_SIBLINGS, li_umm, Fraction(1, 3),
                         "Saudara seibu (≥2) mendapat 1/3 bersama, dibagi rata lintas gender"))

    # -----------------------
    # 6) Anak perempuan & cucu perempuan (dari anak laki-laki)
    #     bersama anak lk / cucu lk → ashobah bil-ghair (asabah.py)
    # -----------------------
    if q(H.SON) == 0:
        if q(H.DAUGHTER) == 1:
            items.append(_fi(H.DAUGHTER.value, 1, Fraction(1, 2),
                             "Anak perempuan tunggal 1/2 karena tanpa anak laki-laki"))
        elif q(H.DAUGHTER) >= 2:
            items.append(_fi(H.DAUGHTER.value, q(H.DAUGHTER), Fraction(2, 3),
                             "≥2 anak perempuan mendapat 2/3 bersama, dibagi rata"))

        if q(H.GRANDDAUGHTER_FROM_SON) > 0 and q(H.GRANDSON_FROM_SON) == 0:
            n = q(H.GRANDDAUGHTER_FROM_SON)
            if q(H.DAUGHTER) == 0:
                items.append(_fi(H.GRANDDAUGHTER_FROM_SON.value, n,
                                 Fraction(1, 2) if n == 1 else Fraction(2, 3),
                                 "Cucu perempuan mendapat 1/2 atau 2/3 karena tanpa anak"))
            elif q(H.DAUGHTER) == 1:
                # Takmilah: menyempurnakan 2/3 bersama anak perempuan
                items.append(_fi(H.GRANDDAUGHTER_FROM_SON.value, n, Fraction(1, 6),
                                 "Cucu perempuan mendapat 1/6 untuk menyempurnakan 2/3"))

    # -----------------------
    # 7) Saudari kandung / seayah (furūḍ)
    #     hanya bila tanpa keturunan, ayah, kakek, dan tanpa saudara lk sederajat
    # -----------------------
    no_agnate_above = not descendant and q(H.FATHER) == 0 and q(H.PATERNAL_GRANDFATHER) == 0
    if no_agnate_above:
        full_sisters = q(H.FULL_SISTER)
        if full_sisters > 0 and q(H.FULL_BROTHER) == 0:
            items.append(_fi(H.FULL_SISTER.value, full_sisters,
                             Fraction(1, 2) if full_sisters == 1 else Fraction(2, 3),
                             "Saudari kandung mendapat 1/2 (tunggal) atau 2/3 (≥2)"))

        paternal_sisters = q(H.PATERNAL_SISTER)
        if paternal_sisters > 0 and q(H.PATERNAL_BROTHER) == 0:
            if full_sisters == 0:
                items.append(_fi(H.PATERNAL_SISTER.value, paternal_sisters,
                                 Fraction(1, 2) if paternal_sisters == 1 else Fraction(2, 3),
                                 "Saudari seayah mendapat 1/2 (tunggal) atau 2/3 (≥2)"))
            elif full_sisters == 1 and q(H.FULL_BROTHER) == 0:
                items.append(_fi(H.PATERNAL_SISTER.value, paternal_sisters, Fraction(1, 6),
                                 "Saudari seayah mendapat 1/6 untuk menyempurnakan 2/3"))

    return items, FurudhFacts(descendant, multiple_siblings, umari)
