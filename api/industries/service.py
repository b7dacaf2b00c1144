"""
Industry business rules.

Scope:
- industry code derivation (slug of the display name)
- duplicate checks before insert
- grouping the industry/company join into the response shape
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from slugify import slugify

from companies import repository as companies_repository
from core.errors import ApiError, ConflictError, NotFoundError

from . import repository

logger = logging.getLogger(__name__)

ASSOCIATED_MESSAGE = "Company successfully associated with industry"


def industry_code(name: str) -> str:
    """
    "Information Technology" -> "information-technology".
    """
    return slugify(name or "", lowercase=True)


def group_industry_rows(rows: Iterable[dict[str, Any]]) -> dict[str, dict[str, Any]]:
    """
    Fold LEFT JOIN rows into {code: {"industry": name, "companies": [codes]}}.

    Row order is preserved, so sorted input gives sorted company lists.
    """
    industries: dict[str, dict[str, Any]] = {}
    for row in rows:
        code = row["industry_code"]
        entry = industries.get(code)
        if entry is None:
            entry = {"industry": row["industry"], "companies": []}
            industries[code] = entry
        company_code = row.get("company_code")
        if company_code is not None:
            entry["companies"].append(company_code)
    return industries


def _already_associated(company_code: str, industry_code: str) -> ConflictError:
    return ConflictError(f"Company {company_code} is already associated with industry {industry_code}")


async def create_industry(name: str) -> dict:
    code = industry_code(name)
    if not code:
        raise ApiError("Industry name must contain letters or digits.")

    if await repository.industry_exists(code):
        raise ConflictError("Industry already exists")

    row = await repository.insert_industry(code=code, industry=name)
    if row is None:
        raise ConflictError("Industry already exists")

    logger.info("industry_created code=%s", code)
    return {"code": row["code"], "industry": row["industry"]}


async def list_industries() -> dict[str, dict[str, Any]]:
    rows = await repository.list_industries_with_companies()
    return group_industry_rows(rows)


async def associate_company(*, company_code: str, industry_code: str) -> str:
    if not await companies_repository.company_exists(company_code):
        raise NotFoundError(f"Company with code {company_code} not found")

    if not await repository.industry_exists(industry_code):
        raise NotFoundError(f"Industry with code {industry_code} not found")

    if await repository.association_exists(company_code=company_code, industry_code=industry_code):
        raise _already_associated(company_code, industry_code)

    inserted = await repository.insert_association(
        company_code=company_code,
        industry_code=industry_code,
    )
    if not inserted:
        raise _already_associated(company_code, industry_code)

    logger.info("company_associated company_code=%s industry_code=%s", company_code, industry_code)
    return ASSOCIATED_MESSAGE
