# app/models/vehicle.py
"""
Vehicle registry table.
One row per registered vehicle. Plate uniqueness is checked by
VehicleService.add(), not by the schema, so updates may reuse a plate.
"""

from sqlalchemy import Column, Integer, String
from app.database import Base


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plate = Column(String(20), nullable=False, index=True)
    make = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)   # holds the manufacture year, e.g. "2015"
    color = Column(String(30), nullable=False)
    owner = Column(String(200), nullable=False)

    def __repr__(self):
        return f"<Vehicle {self.id} plate={self.plate} make={self.make} owner={self.owner}>"
