"""
Invoice persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

import asyncpg

from core import db

INVOICE_COLUMNS = "id, comp_code, amt, paid, add_date, paid_date"


def next_paid_date(
    *,
    was_paid: bool,
    previous_paid_date: date | None,
    paid: bool,
    today: date,
) -> date | None:
    """
    paid_date after an update: stamped on unpaid -> paid, cleared on
    paid -> unpaid, otherwise carried over.
    """
    if not paid:
        return None
    if not was_paid:
        return today
    return previous_paid_date


async def list_invoices() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, comp_code
        FROM invoices
        ORDER BY id
        """
    )


async def get_invoice_with_company(invoice_id: int) -> dict[str, Any] | None:
    """
    Flat invoice + company row. Invoices whose company row is gone are not returned.
    """
    return await db.fetch_one(
        """
        SELECT i.id,
               i.amt,
               i.paid,
               i.add_date,
               i.paid_date,
               i.comp_code,
               c.name,
               c.description
        FROM invoices AS i
        INNER JOIN companies AS c ON i.comp_code = c.code
        WHERE i.id = $1
        """,
        invoice_id,
    )


async def insert_invoice(*, comp_code: str, amt: Decimal) -> dict[str, Any] | None:
    """
    Insert an invoice; `paid` and `add_date` take their column defaults.

    Returns None when comp_code no longer references a company.
    """
    try:
        return await db.fetch_one(
            f"""
            INSERT INTO invoices (comp_code, amt)
            VALUES ($1, $2)
            RETURNING {INVOICE_COLUMNS}
            """,
            comp_code,
            amt,
        )
    except asyncpg.ForeignKeyViolationError:
        return None


async def update_invoice(
    invoice_id: int,
    *,
    amt: Decimal,
    paid: bool,
) -> dict[str, Any] | None:
    """
    Update amt/paid and derive paid_date from the row's previous state.
    "Today" is the database's CURRENT_DATE, the same clock add_date uses.

    The read and the write share one transaction with the row locked, so two
    concurrent updates of the same invoice cannot both see the old `paid`.
    Returns None (and writes nothing) when the invoice does not exist.
    """
    pool = db.pool()
    async with pool.acquire() as conn:  # type: asyncpg.Connection
        async with conn.transaction():
            current = await conn.fetchrow(
                """
                SELECT paid, paid_date, CURRENT_DATE AS today
                FROM invoices
                WHERE id = $1
                FOR UPDATE
                """,
                invoice_id,
            )
            if current is None:
                return None

            paid_date = next_paid_date(
                was_paid=bool(current["paid"]),
                previous_paid_date=current["paid_date"],
                paid=paid,
                today=current["today"],
            )
            row = await conn.fetchrow(
                f"""
                UPDATE invoices
                SET amt = $1,
                    paid = $2,
                    paid_date = $3
                WHERE id = $4
                RETURNING {INVOICE_COLUMNS}
                """,
                amt,
                paid,
                paid_date,
                invoice_id,
            )
            return dict(row) if row is not None else None
