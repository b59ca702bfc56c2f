"""Registration model: one row per accepted buyer/seller sign-up."""

from __future__ import annotations

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from cadastro.core.extensions import db

from .base import CreatedAtMixin, PKMixin, ReprMixin


class Registration(PKMixin, ReprMixin, CreatedAtMixin, db.Model):
    """
    Buyer/seller registration as persisted after validation.

    Fields
    ------
    name, email : str
        Stored as submitted.
    cell_phone, telephone : str
        Digits only (11 and 10 digits respectively).
    cpf, cnpj : str
        Digits only (11 and 14 digits).
    cep : str
        Digits only, no hyphen.
    state, city, public_place, neighborhood : str
        Address as submitted (already cross-checked against the lookup).
    number, complement : str
        Optional; empty string when absent.

    Notes
    -----
    CPF and CNPJ are indexed but not unique: the same person may register
    more than once.
    """

    __tablename__ = "comprador_vendedor"
    __repr_fields__ = ("cpf", "cnpj")

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    cell_phone: Mapped[str] = mapped_column(String(11), nullable=False)
    telephone: Mapped[str] = mapped_column(String(10), nullable=False)
    cpf: Mapped[str] = mapped_column(String(11), nullable=False)
    cnpj: Mapped[str] = mapped_column(String(14), nullable=False)
    cep: Mapped[str] = mapped_column(String(8), nullable=False)
    state: Mapped[str] = mapped_column(String(2), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)
    public_place: Mapped[str] = mapped_column(String(255), nullable=False)
    neighborhood: Mapped[str] = mapped_column(String(255), nullable=False)
    number: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    complement: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    __table_args__ = (
        Index("ix_comprador_vendedor_cpf", "cpf"),
        Index("ix_comprador_vendedor_cnpj", "cnpj"),
    )
