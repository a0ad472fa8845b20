"""SQLAlchemy declarative base for content catalog tables."""

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""


class EnemyModel(Base):
    """ORM model for enemy templates."""

    __tablename__ = "enemies"

    name: Mapped[str] = mapped_column(String, primary_key=True)


class WeaponModel(Base):
    """ORM model for purchasable weapons."""

    __tablename__ = "weapons"

    name: Mapped[str] = mapped_column(String, primary_key=True)
    weight: Mapped[int] = mapped_column(Integer, nullable=False)
    value: Mapped[int] = mapped_column(Integer, nullable=False)
    physique_scale: Mapped[float] = mapped_column(Float, default=0.0)
    technique_scale: Mapped[float] = mapped_column(Float, default=0.0)
    mystique_scale: Mapped[float] = mapped_column(Float, default=0.0)
