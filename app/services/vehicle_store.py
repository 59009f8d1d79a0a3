# app/services/vehicle_store.py
"""
Record store for the vehicles table.
Mechanical translation from Vehicle fields to SQL statements. No business
rules live here — see vehicle_service. Failures are logged, then re-raised
as StoreError.
"""

from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.models.vehicle import Vehicle
from app.services.errors import StoreError
from app.utils.logger import get_logger

logger = get_logger(__name__)


class VehicleStore:
    """Runs one statement per call against the session it was given."""

    def __init__(self, db: Session):
        self.db = db

    def list(self) -> list[Vehicle]:
        try:
            return self.db.query(Vehicle).order_by(Vehicle.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Error listing vehicles: {e}", exc_info=True)
            raise StoreError("Error listing vehicles") from e

    def find_by_id(self, vehicle_id: int) -> Optional[Vehicle]:
        try:
            return self.db.query(Vehicle).filter(Vehicle.id == vehicle_id).first()
        except SQLAlchemyError as e:
            logger.error(f"Error finding vehicle id={vehicle_id}: {e}", exc_info=True)
            raise StoreError("Error finding vehicle") from e

    def exists_by_plate(self, plate: str) -> bool:
        try:
            return self.db.query(Vehicle.id).filter(Vehicle.plate == plate).first() is not None
        except SQLAlchemyError as e:
            logger.error(f"Error checking plate {plate}: {e}", exc_info=True)
            raise StoreError("Error checking plate") from e

    def insert(self, vehicle: Vehicle) -> Vehicle:
        """Persist a new row. The id is assigned by the database."""
        try:
            self.db.add(vehicle)
            self.db.commit()
            self.db.refresh(vehicle)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error inserting vehicle plate={vehicle.plate}: {e}", exc_info=True)
            raise StoreError("Error inserting vehicle") from e
        return vehicle

    def update(self, vehicle: Vehicle) -> None:
        """Overwrite every field of the row matching vehicle.id. No-op if no row matches."""
        try:
            self.db.query(Vehicle).filter(Vehicle.id == vehicle.id).update({
                Vehicle.plate: vehicle.plate,
                Vehicle.make: vehicle.make,
                Vehicle.model: vehicle.model,
                Vehicle.color: vehicle.color,
                Vehicle.owner: vehicle.owner,
            })
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating vehicle id={vehicle.id}: {e}", exc_info=True)
            raise StoreError("Error updating vehicle") from e

    def delete(self, vehicle_id: int) -> None:
        """Remove the row matching vehicle_id. No-op if absent."""
        try:
            self.db.query(Vehicle).filter(Vehicle.id == vehicle_id).delete()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting vehicle id={vehicle_id}: {e}", exc_info=True)
            raise StoreError("Error deleting vehicle") from e
