# Di dalam file: models.py

from sqlalchemy import Column, Integer, String
from database import Base

# Mendefinisikan model tabel untuk Ahli Waris (Heir)
class Heir(Base):
    __tablename__ = "heirs"  # Nama tabel di database

    id = Column(Integer, primary_key=True, index=True)
    category = Column(String, unique=True, index=True)  # id kategori, misal "son"
    group = Column(String, index=True)                  # kelompok kekerabatan
    name_en = Column(String)                            # Nama dalam Bahasa Inggris
    name_ar = Column(String)                            # Nama dalam Bahasa Arab
