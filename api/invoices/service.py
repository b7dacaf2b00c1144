"""
Invoice business rules and response shaping.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from companies import repository as companies_repository
from core.errors import NotFoundError

from . import repository

logger = logging.getLogger(__name__)

# invoices.id is a serial (int4) column.
MAX_INVOICE_ID = 2**31 - 1


def nest_invoice_row(row: dict[str, Any]) -> dict[str, Any]:
    """
    Turn a flat invoice/company join row into the nested invoice payload.
    """
    return {
        "id": row["id"],
        "amt": row["amt"],
        "paid": row["paid"],
        "add_date": row["add_date"],
        "paid_date": row["paid_date"],
        "company": {
            "code": row["comp_code"],
            "name": row["name"],
            "description": row["description"],
        },
    }


def _is_storable_id(invoice_id: int) -> bool:
    return 1 <= invoice_id <= MAX_INVOICE_ID


def _invoice_not_found(invoice_id: int) -> NotFoundError:
    return NotFoundError(f"No such invoice: {invoice_id}")


def _company_not_found(comp_code: str) -> NotFoundError:
    return NotFoundError(f"Company with code {comp_code} not found")


async def list_invoices() -> list[dict[str, Any]]:
    rows = await repository.list_invoices()
    return [{"id": row["id"], "comp_code": row["comp_code"]} for row in rows]


async def get_invoice(invoice_id: int) -> dict[str, Any]:
    if not _is_storable_id(invoice_id):
        raise _invoice_not_found(invoice_id)

    row = await repository.get_invoice_with_company(invoice_id)
    if row is None:
        raise _invoice_not_found(invoice_id)
    return nest_invoice_row(row)


async def create_invoice(*, comp_code: str, amt: Decimal) -> dict[str, Any]:
    if not await companies_repository.company_exists(comp_code):
        raise _company_not_found(comp_code)

    row = await repository.insert_invoice(comp_code=comp_code, amt=amt)
    if row is None:
        raise _company_not_found(comp_code)

    logger.info("invoice_created id=%s comp_code=%s", row["id"], comp_code)
    return row


async def update_invoice(invoice_id: int, *, amt: Decimal, paid: bool) -> dict[str, Any]:
    if not _is_storable_id(invoice_id):
        raise _invoice_not_found(invoice_id)

    row = await repository.update_invoice(invoice_id, amt=amt, paid=paid)
    if row is None:
        raise _invoice_not_found(invoice_id)

    logger.info("invoice_updated id=%s paid=%s", invoice_id, row["paid"])
    return row
