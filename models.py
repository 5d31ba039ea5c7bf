"""Record shapes shared by the form, the storage layer and the calculations."""

from __future__ import annotations

import uuid
from datetime import date as Date
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

INCOME = "income"
EXPENSE = "expense"

TransactionType = Literal["income", "expense"]


def transaction_type(amount: float) -> TransactionType:
    """Classify an amount by its sign; zero counts as income."""
    return INCOME if amount >= 0 else EXPENSE


class Transaction(BaseModel):
    """A persisted entry. ``type`` is a display label only."""

    key: str
    description: str
    amount: float
    date: str
    type: TransactionType


class TransactionForm(BaseModel):
    """Values collected by the add-transaction form.

    Mirrors the form rules: every field is required and the amount can not be
    zero. Messages are the ones shown to the user.
    """

    description: Optional[str] = Field(None, validate_default=True)
    amount: Optional[float] = Field(None, validate_default=True)
    date: Optional[Date] = Field(None, validate_default=True)

    @field_validator("description")
    @classmethod
    def _description_required(cls, value: Optional[str]) -> str:
        if value is None or not value.strip():
            raise ValueError("Por favor, insira a descrição!")
        return value.strip()

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_is_number(cls, value):
        if value is None or value == "":
            raise ValueError("Por favor, insira o valor!")
        if isinstance(value, bool):
            raise ValueError("O valor deve ser um número!")
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ValueError("O valor deve ser um número!") from None

    @field_validator("amount")
    @classmethod
    def _amount_not_zero(cls, value: float) -> float:
        if value == 0:
            raise ValueError("O valor não pode ser zero!")
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _date_required(cls, value):
        if value is None or value == "":
            raise ValueError("Por favor, selecione a data!")
        return value

    def to_transaction(self) -> Transaction:
        return Transaction(
            key=uuid.uuid4().hex,
            description=self.description,
            amount=self.amount,
            date=self.date.isoformat(),
            type=transaction_type(self.amount),
        )


def form_errors(exc: ValidationError) -> list[str]:
    """Plain messages of a failed form, in field order."""
    messages = []
    for error in exc.errors():
        original = (error.get("ctx") or {}).get("error")
        messages.append(str(original) if original is not None else error["msg"])
    return messages


class FinancialSummary(BaseModel):
    income: float = 0.0
    expenses: float = 0.0
    balance: float = 0.0
    savings_rate: float = Field(0.0, serialization_alias="savingsRate")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)
