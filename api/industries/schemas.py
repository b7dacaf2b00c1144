"""
Pydantic schemas for industry endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateIndustryRequest(BaseModel):
    industry: str = Field(..., min_length=1, max_length=200)


class AssociateRequest(BaseModel):
    # Request keys are camelCase on the wire.
    companyCode: str = Field(..., min_length=1)
    industryCode: str = Field(..., min_length=1)
