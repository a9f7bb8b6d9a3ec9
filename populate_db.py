# Di dalam file: populate_db.py

import logging
import os

import requests

from ibadah.rules.catalog import get_heir_list

logger = logging.getLogger(__name__)

# URL endpoint API kita untuk membuat ahli waris
API_URL = os.environ.get("API_URL", "http://127.0.0.1:8000/heirs/")


def heirs_data():
    """Payload JSON untuk setiap entri katalog ahli waris."""
    return [
        {
            "category": entry.id.value,
            "group": entry.group.value,
            "name_en": entry.name_en,
            "name_ar": entry.name_ar,
        }
        for entry in get_heir_list()
    ]


def populate_database(api_url: str = API_URL, session=None) -> dict:
    """Kirim katalog ke API; data yang sudah ada (HTTP 400) dilewati."""
    if session is not None:
        return _post_heirs(session, api_url)
    with requests.Session() as http:
        return _post_heirs(http, api_url)


def _post_heirs(http, api_url: str) -> dict:
    summary = {"created": 0, "skipped": 0, "failed": 0}
    logger.info("Memulai proses memasukkan data ahli waris ke %s", api_url)
    for heir in heirs_data():
        try:
            response = http.post(api_url, json=heir, timeout=10)
        except requests.exceptions.ConnectionError as e:
            logger.error("Koneksi ke server gagal. Pastikan server Uvicorn sedang berjalan. Detail: %s", e)
            summary["failed"] += 1
            break

        if response.status_code == 200:
            logger.info("[BERHASIL] Menambahkan: %s", heir["category"])
            summary["created"] += 1
        elif response.status_code == 400:
            logger.info("[INFO] Data untuk '%s' sudah ada, dilewati.", heir["category"])
            summary["skipped"] += 1
        else:
            logger.warning("[ERROR] Gagal menambahkan %s. Status: %s, Pesan: %s",
                           heir["category"], response.status_code, response.text)
            summary["failed"] += 1
    logger.info("Proses selesai: %s", summary)
    return summary


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    populate_database()
