"""Pydantic schemas used across the project."""
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ledger_server.domain.transactions import TransactionType


class TransactionCreate(BaseModel):
    title: str = Field(..., min_length=1)
    # Same precision as the ``transactions.amount`` column: numeric(14, 2).
    amount: Decimal = Field(
        ...,
        ge=0,
        max_digits=14,
        decimal_places=2,
        description="Unsigned amount; the type decides the sign",
    )
    type: TransactionType

    @field_validator("amount", mode="before")
    @classmethod
    def amount_must_be_a_number(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            raise ValueError("amount must be a number")
        return value


class TransactionResponse(BaseModel):
    id: str
    title: str
    amount: float
    session_id: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TransactionListResponse(BaseModel):
    transactions: list[TransactionResponse] = Field(default_factory=list)


class TransactionDetailResponse(BaseModel):
    # Key kept plural for compatibility with existing clients.
    transactions: Optional[TransactionResponse] = None


class SummaryAmount(BaseModel):
    amount: float = 0


class SummaryResponse(BaseModel):
    summary: SummaryAmount


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
