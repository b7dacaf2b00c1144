"""
Company lookups shared by the industry and invoice features.

Company rows are loaded by an external process; this API only reads them.
"""

from __future__ import annotations

from core import db


async def company_exists(company_code: str) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM companies
        WHERE code = $1
        LIMIT 1
        """,
        company_code,
    )
    return row is not None
