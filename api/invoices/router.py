"""
Invoice API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import schemas, service

router = APIRouter()


@router.get("/invoices")
async def list_invoices() -> dict:
    invoices = await service.list_invoices()
    return {"invoices": invoices}


@router.get("/invoices/{invoice_id}")
async def get_invoice(invoice_id: int) -> dict:
    """
    One invoice with its company nested under `company`.
    """
    invoice = await service.get_invoice(invoice_id)
    return {"invoice": invoice}


@router.post("/invoices")
async def create_invoice(request: schemas.CreateInvoiceRequest) -> dict:
    invoice = await service.create_invoice(comp_code=request.comp_code, amt=request.amt)
    return {"invoice": invoice}


@router.put("/invoices/{invoice_id}")
async def update_invoice(invoice_id: int, request: schemas.UpdateInvoiceRequest) -> dict:
    invoice = await service.update_invoice(invoice_id, amt=request.amt, paid=request.paid)
    return {"invoice": invoice}
