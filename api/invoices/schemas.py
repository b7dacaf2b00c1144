"""
Pydantic schemas for invoice endpoints.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class CreateInvoiceRequest(BaseModel):
    comp_code: str = Field(..., min_length=1)
    amt: Decimal = Field(..., gt=0)


class UpdateInvoiceRequest(BaseModel):
    amt: Decimal = Field(..., gt=0)
    paid: bool
