"""
petclinic_customers.db.models

Persistence schema for the customers service.

Responsibilities:
- Define the `Owner` ORM model (clinic customer record).
"""

from __future__ import annotations

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petclinic_customers.db.base import Base


class Owner(Base):
    __tablename__ = "owners"

    # Assigned by the database on insert; None until the first flush.
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    first_name: Mapped[str | None] = mapped_column(String(30), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(30), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(80), nullable=True)
    telephone: Mapped[str | None] = mapped_column(String(20), nullable=True)

    __table_args__ = (Index("ix_owners_last_name", "last_name"),)

    def __repr__(self) -> str:
        return f"Owner(id={self.id!r}, last_name={self.last_name!r})"


# --- Module Notes -----------------------------------------------------------
# Pets and visits live in sibling services; this schema only carries owners.
