"""
Test netting harta: utang, biaya jenazah, batas wasiat 1/3
"""

import pytest

from ibadah.math.netting import net_estate
from schemas import ErrorCode, WarningCode


class TestNetting:

    def test_wasiat_melebihi_sepertiga_dipotong(self):
        result = net_estate(100_000_000, requested_bequest=40_000_000)
        assert result.errors == []
        assert result.applied_bequest == pytest.approx(33_333_333.33, abs=0.01)
        assert result.net_estate == pytest.approx(66_666_666.67, abs=0.01)
        assert [w.code for w in result.warnings] == [WarningCode.BEQUEST_CAPPED]
        assert result.warnings[0].amount == pytest.approx(6_666_666.67, abs=0.01)

    def test_wasiat_tepat_sepertiga_tidak_diperingatkan(self):
        result = net_estate(300, requested_bequest=100)
        assert result.warnings == []
        assert result.net_estate == pytest.approx(200)

    def test_kewajiban_dikurangkan(self):
        result = net_estate(1000, asset_debt=100, non_asset_debt=50, funeral=25)
        assert result.liabilities == pytest.approx(175)
        assert result.net_estate == pytest.approx(825)

    def test_kewajiban_sama_dengan_harta_bersih_nol(self):
        result = net_estate(1000, asset_debt=1000)
        assert result.errors == []
        assert result.net_estate == 0

    def test_kewajiban_melebihi_harta(self):
        result = net_estate(1000, asset_debt=900, requested_bequest=200)
        assert [e.code for e in result.errors] == [ErrorCode.LIABILITIES_EXCEED_ESTATE]
        assert result.net_estate == 0

    def test_input_negatif_dilaporkan_per_field(self):
        result = net_estate(1000, asset_debt=-1, funeral=-5)
        assert [e.code for e in result.errors] == [ErrorCode.NEGATIVE_INPUT] * 2
        assert [e.field for e in result.errors] == ["asset_debt", "funeral"]

    def test_harta_kotor_negatif(self):
        result = net_estate(-1)
        assert [e.field for e in result.errors] == ["gross"]
