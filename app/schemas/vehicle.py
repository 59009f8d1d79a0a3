# app/schemas/vehicle.py
from pydantic import BaseModel


class VehicleCreate(BaseModel):
    plate: str
    make: str
    model: str        # manufacture year, e.g. "2015"
    color: str        # Red | White | Black | Blue | Gray
    owner: str


class VehicleUpdate(VehicleCreate):
    """Full replacement of every field except id."""


class VehicleOut(BaseModel):
    id: int
    plate: str
    make: str
    model: str
    color: str
    owner: str

    class Config:
        from_attributes = True
