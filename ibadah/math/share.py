# ibadah/math/share.py

from fractions import Fraction

# selisih pembulatan yang masih ditoleransi (satuan mata uang)
ROUNDING_TOLERANCE = 1


def fraction_text(value: Fraction) -> str:
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


def normalization_divisor(total_share: Fraction) -> Fraction:
    """'Aul sederhana: bila total bagian > 1, semua bagian dibagi total (bukan 'Aul kitab)."""
    return max(Fraction(1), total_share)


def amount_of(share: Fraction, net_estate: float, divisor: Fraction) -> float:
    return round(float(share / divisor) * net_estate, 2)
