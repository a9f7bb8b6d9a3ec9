# Di dalam file: crud.py

from sqlalchemy.orm import Session
import models
import schemas

def get_heir_by_category(db: Session, category: str):
    """
    Fungsi untuk mencari ahli waris berdasarkan id kategorinya.
    Ini berguna agar tidak ada data duplikat.
    """
    return db.query(models.Heir).filter(models.Heir.category == category).first()

def create_heir(db: Session, heir: schemas.HeirCreate):
    """
    Fungsi untuk membuat dan menyimpan ahli waris baru ke database.
    """
    db_heir = models.Heir(
        category=heir.category.value,
        group=heir.group.value,
        name_en=heir.name_en,
        name_ar=heir.name_ar,
    )
    db.add(db_heir)
    db.commit()
    db.refresh(db_heir)
    return db_heir

def get_heirs(db: Session, skip: int = 0, limit: int = 100):
    """
    Fungsi untuk mengambil daftar semua ahli waris dari database.
    'skip' dan 'limit' berguna untuk paginasi jika data sudah banyak.
    """
    return db.query(models.Heir).order_by(models.Heir.id).offset(skip).limit(limit).all()
