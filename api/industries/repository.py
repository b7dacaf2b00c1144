"""
Industry persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def industry_exists(code: str) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM industries
        WHERE code = $1
        LIMIT 1
        """,
        code,
    )
    return row is not None


async def insert_industry(*, code: str, industry: str) -> dict[str, Any] | None:
    """
    Insert an industry.

    Returns None when the code is already taken (the unique constraint is the
    final authority when two requests race past the existence check).
    """
    return await db.fetch_one(
        """
        INSERT INTO industries (code, industry)
        VALUES ($1, $2)
        ON CONFLICT (code) DO NOTHING
        RETURNING code, industry
        """,
        code,
        industry,
    )


async def list_industries_with_companies() -> list[dict[str, Any]]:
    """
    One row per (industry, company) pair; industries without companies
    appear once with company_code = NULL.
    """
    return await db.fetch_all(
        """
        SELECT i.code AS industry_code, i.industry, ci.company_code
        FROM industries AS i
        LEFT JOIN company_industry AS ci ON i.code = ci.industry_code
        ORDER BY i.code, ci.company_code
        """
    )


async def association_exists(*, company_code: str, industry_code: str) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM company_industry
        WHERE company_code = $1
          AND industry_code = $2
        LIMIT 1
        """,
        company_code,
        industry_code,
    )
    return row is not None


async def insert_association(*, company_code: str, industry_code: str) -> bool:
    """
    Link a company to an industry. Returns False if the pair already exists.
    """
    row = await db.fetch_one(
        """
        INSERT INTO company_industry (company_code, industry_code)
        VALUES ($1, $2)
        ON CONFLICT (company_code, industry_code) DO NOTHING
        RETURNING company_code
        """,
        company_code,
        industry_code,
    )
    return row is not None
