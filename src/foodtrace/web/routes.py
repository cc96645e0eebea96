"""Page routes: render screens and turn form posts into page actions."""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ..context import LayoutContext
from ..models import FLOAT_FIELDS, INTEGER_FIELDS, InventoryRecord
from ..pages import EmployeeAwardPage, FoodWastePage, InventoryPage
from .render import render_inventory, render_placeholder

router = APIRouter()

_EDITABLE_FIELDS = INTEGER_FIELDS + FLOAT_FIELDS


def get_context(request: Request) -> LayoutContext:
    return request.app.state.context


def get_inventory_page(request: Request) -> InventoryPage:
    return request.app.state.inventory_page


def _back_to_inventory() -> RedirectResponse:
    return RedirectResponse("/", status_code=303)


async def _get_row(page: InventoryPage, record_id: int) -> InventoryRecord:
    record = page.find(record_id)
    if record is None:
        await page.load()
        record = page.find(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Inventory record {record_id} not loaded")
    return record


@router.get("/", response_class=HTMLResponse)
async def inventory(
    context: LayoutContext = Depends(get_context),
    page: InventoryPage = Depends(get_inventory_page),
) -> HTMLResponse:
    await page.load()
    return HTMLResponse(render_inventory(context, page))


@router.post("/records/new")
async def add_record(page: InventoryPage = Depends(get_inventory_page)) -> RedirectResponse:
    page.handle_add()
    return _back_to_inventory()


@router.post("/records/cancel")
async def cancel_record(page: InventoryPage = Depends(get_inventory_page)) -> RedirectResponse:
    page.close_form()
    return _back_to_inventory()


@router.post("/records/save")
async def save_record(
    request: Request,
    page: InventoryPage = Depends(get_inventory_page),
) -> RedirectResponse:
    # Blank inputs are kept so they parse to 0 like any other non-number.
    form = await request.form()
    for name in _EDITABLE_FIELDS:
        raw = form.get(name)
        if isinstance(raw, str):
            page.set_field(name, raw)
    await page.handle_save()
    return _back_to_inventory()


@router.post("/records/{record_id}/edit")
async def edit_record(
    record_id: int,
    page: InventoryPage = Depends(get_inventory_page),
) -> RedirectResponse:
    page.handle_edit(await _get_row(page, record_id))
    return _back_to_inventory()


@router.post("/records/{record_id}/delete")
async def delete_row(
    record_id: int,
    page: InventoryPage = Depends(get_inventory_page),
) -> RedirectResponse:
    await page.handle_delete(await _get_row(page, record_id))
    return _back_to_inventory()


@router.get("/foodWaste", response_class=HTMLResponse)
async def food_waste(
    request: Request,
    context: LayoutContext = Depends(get_context),
) -> HTMLResponse:
    page: FoodWastePage = request.app.state.food_waste_page
    return HTMLResponse(render_placeholder(context, page))


@router.get("/employeeAward", response_class=HTMLResponse)
async def employee_award(
    request: Request,
    context: LayoutContext = Depends(get_context),
) -> HTMLResponse:
    page: EmployeeAwardPage = request.app.state.employee_award_page
    return HTMLResponse(render_placeholder(context, page))
