"""
Test endpoint HTTP (FastAPI) dan skrip pengisian katalog
"""

import pytest
import requests

import main
import populate_db
from populate_db import heirs_data, populate_database


class TestKatalog:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "message" in response.json()

    def test_katalog_statis(self, client):
        catalog = client.get("/heirs/catalog").json()
        assert len(catalog) == 25
        assert (catalog[0]["id"], catalog[0]["group"], catalog[0]["name_en"]) == ("husband", "spouse", "Husband")
        assert catalog[-1]["id"] == "female_emancipator"

    def test_tambah_dan_baca_ahli_waris(self, client):
        payload = heirs_data()[0]
        created = client.post("/heirs/", json=payload)
        assert created.status_code == 200
        assert created.json()["category"] == payload["category"]

        duplicate = client.post("/heirs/", json=payload)
        assert duplicate.status_code == 400

        heirs = client.get("/heirs/").json()
        assert [h["category"] for h in heirs] == [payload["category"]]

    def test_kategori_tidak_dikenal_ditolak(self, client):
        payload = dict(heirs_data()[0], category="neighbour")
        assert client.post("/heirs/", json=payload).status_code == 422

    def test_populate_database(self, client):
        first = populate_database(api_url="/heirs/", session=client)
        assert first == {"created": 25, "skipped": 0, "failed": 0}
        second = populate_database(api_url="/heirs/", session=client)
        assert second == {"created": 0, "skipped": 25, "failed": 0}
        assert len(client.get("/heirs/").json()) == 25


class TestPerhitungan:

    def test_ahli_waris_terhalang(self, client):
        response = client.post("/heirs/blocked", json={"heirs": {"father": 1, "mother": 1}})
        assert response.status_code == 200
        assert response.json()["blocked"][:2] == ["paternal_grandfather", "paternal_grandmother"]

    def test_netting(self, client):
        response = client.post("/estate/net", json={"gross": 900, "funeral": 100, "bequest": 500})
        body = response.json()
        assert body["applied_bequest"] == pytest.approx(300)
        assert body["net_estate"] == pytest.approx(500)
        assert body["warnings"][0]["code"] == "BequestCappedWarning"

    def test_suami_dan_anak_perempuan(self, client):
        response = client.post("/calculate/", json={
            "estate": {"gross": 120_000_000},
            "heirs": {"husband": 1, "daughter": 1},
        })
        assert response.status_code == 200
        body = response.json()
        assert body["errors"] == []
        amounts = {s["heir"]: s["share_amount"] for s in body["distribution"]}
        assert amounts == {"husband": 30_000_000, "daughter": 60_000_000}
        assert [w["code"] for w in body["warnings"]] == ["RoundingWarning"]

    def test_kesalahan_dikembalikan_di_body(self, client):
        response = client.post("/calculate/", json={
            "estate": {"gross": 1000},
            "heirs": {"husband": 1, "wife": 1},
        })
        assert response.status_code == 200
        assert response.json()["errors"][0]["code"] == "InvalidSpouseCombination"
        assert response.json()["distribution"] == []

    def test_jadwal_amalan(self, client):
        response = client.post("/habits/due", json={
            "habit": {"freq": "weekly", "schedule": {"dow": [1]}},
            "on": "2024-03-11",
        })
        assert response.json() == {"due": True, "period_key": "2024-W11", "reminder_today": True}

    def test_streak_amalan(self, client):
        response = client.post("/habits/streak", json={
            "habit": {"freq": "daily"},
            "completions": {"2024-03-09": True, "2024-03-10": True},
            "on": "2024-03-11",
            "best": 1,
        })
        assert response.status_code == 200
        assert response.json() == {"current": 2, "best": 2, "last": "2024-03-10"}


class _SessionMati:
    """Sesi HTTP palsu: server tidak bisa dihubungi."""

    def __init__(self):
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True

    def post(self, url, json=None, timeout=None):
        raise requests.exceptions.ConnectionError("server mati")


class TestPopulateDb:

    def test_sesi_bawaan_ditutup(self, monkeypatch):
        session = _SessionMati()
        monkeypatch.setattr(populate_db.requests, "Session", lambda: session)
        summary = populate_database(api_url="http://127.0.0.1:9/heirs/")
        assert summary == {"created": 0, "skipped": 0, "failed": 1}
        assert session.closed

    def test_logger_per_modul(self):
        assert main.logger.name == "main"
        assert populate_db.logger.name == "populate_db"
