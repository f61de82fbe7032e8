"""SQLAlchemy models for the cities schema."""
from sqlalchemy import Column, DateTime, Numeric, String, Text
from sqlalchemy.dialects import mysql

from app.infrastructure.persistence.db import Base

# Exact decimal for coordinates; see converters.py
COORDINATE_PRECISION = 38
COORDINATE_SCALE = 30

# MySQL DATETIME drops fractional seconds unless fsp is given
Timestamp = DateTime().with_variant(mysql.DATETIME(fsp=6), "mysql")


class City(Base):
    __tablename__ = "city"

    id = Column(String(255), primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    longitude = Column(Numeric(COORDINATE_PRECISION, COORDINATE_SCALE), nullable=False)
    latitude = Column(Numeric(COORDINATE_PRECISION, COORDINATE_SCALE), nullable=False)
    updated_at = Column(Timestamp, nullable=False)
    created_at = Column(Timestamp, nullable=False)
