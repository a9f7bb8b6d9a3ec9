# ibadah/math/netting.py

import logging

from schemas import (
    CalculationError,
    CalculationWarning,
    ErrorCode,
    NettingResult,
    WarningCode,
)

logger = logging.getLogger(__name__)

# wasiat maksimal sepertiga harta
BEQUEST_CAP_RATIO = 3


def net_estate(gross: float,
               asset_debt: float = 0.0,
               non_asset_debt: float = 0.0,
               funeral: float = 0.0,
               requested_bequest: float = 0.0) -> NettingResult:
    """
    Hitung harta bersih (tirkah yang dibagi):
    1. Tolak input negatif (per field).
    2. Batasi wasiat pada 1/3 harta kotor, beri peringatan bila dipotong.
    3. Kewajiban = utang aset + utang lain + biaya jenazah.
    4. Gagal bila kewajiban + wasiat > harta kotor.
    5. Bersih = max(0, kotor - kewajiban - wasiat).
    """
    fields = {
        "gross": gross,
        "asset_debt": asset_debt,
        "non_asset_debt": non_asset_debt,
        "funeral": funeral,
        "bequest": requested_bequest,
    }
    errors = [
        CalculationError(code=ErrorCode.NEGATIVE_INPUT, field=name)
        for name, value in fields.items() if value < 0
    ]
    if errors:
        logger.info("Estate netting rejected negative input: %s", [e.field for e in errors])
        return NettingResult(net_estate=0.0, applied_bequest=0.0, liabilities=0.0, errors=errors)

    warnings = []
    cap = gross / BEQUEST_CAP_RATIO
    applied_bequest = requested_bequest
    if requested_bequest > cap:
        applied_bequest = cap
        warnings.append(CalculationWarning(code=WarningCode.BEQUEST_CAPPED,
                                           amount=requested_bequest - cap))

    liabilities = asset_debt + non_asset_debt + funeral
    if liabilities + applied_bequest > gross:
        logger.info("Estate netting failed: liabilities %.2f + bequest %.2f exceed gross %.2f",
                    liabilities, applied_bequest, gross)
        return NettingResult(
            net_estate=0.0,
            applied_bequest=applied_bequest,
            liabilities=liabilities,
            errors=[CalculationError(code=ErrorCode.LIABILITIES_EXCEED_ESTATE)],
            warnings=warnings,
        )

    return NettingResult(
        net_estate=max(0.0, gross - liabilities - applied_bequest),
        applied_bequest=applied_bequest,
        liabilities=liabilities,
        warnings=warnings,
    )
