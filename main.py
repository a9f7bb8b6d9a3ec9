# Di dalam file: main.py

import logging
import os

from fastapi import FastAPI, Depends, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

import calculator
import crud
import models
import schemas
from database import SessionLocal, engine
from ibadah.habits.schedule import (
    compute_streak,
    is_due_this_period,
    is_reminder_scheduled_for_today,
    period_key,
)
from ibadah.math.netting import net_estate
from ibadah.rules.catalog import get_heir_list
from ibadah.rules.hajb import get_blocked_heirs, sorted_blocked

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Membuat tabel di database (jika belum ada)
models.Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Ibadah - Kalkulator Faraidh & Jadwal Amalan",
    description="API untuk pembagian waris Islam (hajb, furudh, ashobah) dan jadwal amalan harian.",
)
origins = [
    o.strip() for o in os.environ.get(
        "CORS_ORIGINS", "http://localhost,http://localhost:3000,http://localhost:5173"
    ).split(",") if o.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Dependency untuk Sesi Database ---
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
# -----------------------------------------

@app.get("/")
def read_root():
    """
    Endpoint utama untuk menyapa pengguna.
    """
    return {"message": "Selamat datang di Kalkulator Faraidh & Jadwal Amalan"}

@app.get("/heirs/catalog", response_model=list[schemas.CatalogEntry])
def read_heir_catalog():
    """
    Katalog statis ahli waris (urutan tampilan), tanpa database.
    """
    return [entry._asdict() for entry in get_heir_list()]

@app.post("/heirs/", response_model=schemas.Heir)
def create_heir_endpoint(heir: schemas.HeirCreate, db: Session = Depends(get_db)):
    """
    Endpoint untuk membuat/menambahkan ahli waris baru.
    """
    db_heir = crud.get_heir_by_category(db, category=heir.category.value)
    if db_heir:
        raise HTTPException(status_code=400, detail="Ahli waris dengan kategori ini sudah ada")
    logger.info("Registering heir category %s", heir.category.value)
    return crud.create_heir(db=db, heir=heir)

@app.get("/heirs/", response_model=list[schemas.Heir])
def read_heirs(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    """
    Endpoint untuk membaca daftar semua ahli waris.
    """
    return crud.get_heirs(db, skip=skip, limit=limit)

@app.post("/heirs/blocked", response_model=schemas.BlockedResult)
def read_blocked_heirs(payload: schemas.HeirCountInput):
    """
    Ahli waris yang mahjub untuk kombinasi ini (untuk menonaktifkan input di UI).
    """
    return schemas.BlockedResult(blocked=sorted_blocked(get_blocked_heirs(payload.heirs)))

@app.post("/estate/net", response_model=schemas.NettingResult)
def run_estate_netting(estate: schemas.EstateInput):
    return net_estate(estate.gross, estate.asset_debt, estate.non_asset_debt,
                      estate.funeral, estate.bequest)

@app.post("/calculate/", response_model=schemas.CalculationResult)
def run_calculation(calculation_data: schemas.CalculationInput):
    """
    Endpoint utama untuk menjalankan perhitungan Faraidh.
    Kesalahan input dikembalikan di field `errors`, bukan sebagai HTTP error.
    """
    return calculator.distribute_estate(calculation_data.estate, calculation_data.heirs)

@app.post("/habits/due", response_model=schemas.HabitDueResult)
def run_habit_due(payload: schemas.HabitDueInput):
    return schemas.HabitDueResult(
        due=is_due_this_period(payload.habit, payload.on),
        period_key=period_key(payload.habit, payload.on),
        reminder_today=is_reminder_scheduled_for_today(payload.habit, payload.on),
    )

@app.post("/habits/streak", response_model=schemas.Streak)
def run_habit_streak(payload: schemas.HabitStreakInput):
    """
    Hitung ulang streak amalan dari catatan penyelesaian per periode.
    """
    return compute_streak(payload.habit, payload.completions, payload.on, best=payload.best)
