from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Enum, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from space_registry.domain.ship import ShipType
from space_registry.infra.db.models.base import Base


class ShipRow(Base):
    __tablename__ = "ship"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    planet: Mapped[str] = mapped_column(String(50), nullable=False)
    ship_type: Mapped[ShipType] = mapped_column(
        Enum(ShipType, native_enum=False, length=16), nullable=False
    )
    production_date: Mapped[datetime] = mapped_column(
        "prod_date", DateTime(timezone=True), nullable=False
    )

    # Stored as an integer flag (0/1), filters compare against the integer
    is_used: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    speed: Mapped[float] = mapped_column(Float, nullable=False)
    crew_size: Mapped[int] = mapped_column(Integer, nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
