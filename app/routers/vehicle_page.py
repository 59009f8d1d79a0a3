# app/routers/vehicle_page.py
"""
HTML entry point for the registry.
GET  /vehicles — show all vehicles.
POST /vehicles — add a vehicle from the form, then show the refreshed list.
Business-rule errors are shown verbatim; database errors only generically.
"""

from urllib.parse import parse_qs
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from app.models.vehicle import Vehicle
from app.services.errors import StoreError, ValidationError
from app.services.vehicle_service import VehicleService, get_vehicle_service
from app.utils.html_view import render_vehicle_page
from app.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)

FORM_FIELDS = ("plate", "make", "model", "color", "owner")


def _render(service: VehicleService, message: str = None, error: str = None) -> HTMLResponse:
    vehicles = []
    try:
        vehicles = service.list()
    except StoreError:
        error = "Error listing vehicles."
    html = render_vehicle_page(vehicles, service.rules.allowed_colors, message=message, error=error)
    return HTMLResponse(content=html)


@router.get("/vehicles", response_class=HTMLResponse, summary="Vehicle registry page")
def show_vehicles(service: VehicleService = Depends(get_vehicle_service)):
    vehicles = []
    error = None
    try:
        vehicles = service.list()
    except StoreError:
        error = "Database error."
    html = render_vehicle_page(vehicles, service.rules.allowed_colors, error=error)
    return HTMLResponse(content=html)


async def read_vehicle_form(request: Request) -> dict:
    """Dependency — decodes the urlencoded form body into the vehicle fields."""
    raw_body = await request.body()
    form = parse_qs(raw_body.decode("utf-8", errors="replace"), keep_blank_values=True)
    return {name: form.get(name, [None])[0] for name in FORM_FIELDS}


@router.post("/vehicles", response_class=HTMLResponse, summary="Add a vehicle from the form")
def submit_vehicle(values: dict = Depends(read_vehicle_form),
                   service: VehicleService = Depends(get_vehicle_service)):
    logger.info(f"Form submission for plate={values['plate']}")

    message = None
    error = None
    try:
        service.add(Vehicle(**values))
        message = "Vehicle added successfully."
    except ValidationError as e:
        error = e.message
    except StoreError:
        error = "Technical error while saving to the database."

    return _render(service, message=message, error=error)
