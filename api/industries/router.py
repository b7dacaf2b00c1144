"""
Industry API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import schemas, service

router = APIRouter()


@router.get("/industries")
async def list_industries() -> dict:
    """
    All industries with the codes of their associated companies.
    """
    industries = await service.list_industries()
    return {"industries": industries}


@router.post("/industries", status_code=status.HTTP_201_CREATED)
async def create_industry(request: schemas.CreateIndustryRequest) -> dict:
    industry = await service.create_industry(request.industry)
    return {"industry": industry}


@router.post("/industries/associate", status_code=status.HTTP_201_CREATED)
async def associate_company(request: schemas.AssociateRequest) -> dict:
    message = await service.associate_company(
        company_code=request.companyCode,
        industry_code=request.industryCode,
    )
    return {"message": message}
