# app/routers/vehicles.py
"""Vehicle registry — JSON CRUD endpoints. All mutations go through VehicleService."""

from fastapi import APIRouter, Depends, HTTPException, status
from app.models.vehicle import Vehicle
from app.schemas.vehicle import VehicleCreate, VehicleOut, VehicleUpdate
from app.services.vehicle_service import VehicleService, get_vehicle_service

router = APIRouter()


@router.get("/vehicles", response_model=list[VehicleOut], summary="List registered vehicles")
def list_vehicles(service: VehicleService = Depends(get_vehicle_service)):
    return service.list()


@router.get("/vehicles/{vehicle_id}", response_model=VehicleOut, summary="Get one vehicle")
def get_vehicle(vehicle_id: int, service: VehicleService = Depends(get_vehicle_service)):
    vehicle = service.find_by_id(vehicle_id)
    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return vehicle


@router.post("/vehicles", response_model=VehicleOut, status_code=status.HTTP_201_CREATED,
             summary="Register a new vehicle")
def register_vehicle(body: VehicleCreate, service: VehicleService = Depends(get_vehicle_service)):
    """Validates business rules, then stores the vehicle. Rule violations return 400."""
    return service.add(Vehicle(**body.model_dump()))


@router.put("/vehicles/{vehicle_id}", summary="Replace a vehicle's fields")
def update_vehicle(vehicle_id: int, body: VehicleUpdate,
                   service: VehicleService = Depends(get_vehicle_service)):
    service.update(Vehicle(id=vehicle_id, **body.model_dump()))
    return {"status": "updated", "id": vehicle_id}


@router.delete("/vehicles/{vehicle_id}", summary="Remove a vehicle")
def remove_vehicle(vehicle_id: int, service: VehicleService = Depends(get_vehicle_service)):
    """Unknown ids are accepted silently. Vehicles owned by the protected owner return 400."""
    service.delete(vehicle_id)
    return {"status": "removed", "id": vehicle_id}
