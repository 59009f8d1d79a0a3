# app/services/vehicle_service.py
"""
Business rules for the vehicle registry.
Every mutation passes through VehicleService, which validates the candidate
record and then delegates to VehicleStore.

Rules applied by add(), in order, stopping at the first failure:
  1. plate not already registered
  2. owner (trimmed) at least 5 characters
  3. make, model and plate at least 3 characters
  4. color in the allowed list (exact match)
  5. model, read as a manufacture year, no older than MAX_VEHICLE_AGE_YEARS
  6. no ';' in plate and no '--' in make
  7. Ferrari make → notifier is called

update() re-checks rules 2-6 only; it never checks plate uniqueness and never
notifies. delete() refuses vehicles owned by the protected owner.

Plate uniqueness is check-then-insert with no lock: two concurrent adds of
the same plate can both succeed.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional
from sqlalchemy.orm import sessionmaker
from app.config import settings
from app.database import SessionLocal
from app.models.vehicle import Vehicle
from app.services.errors import ValidationError
from app.services.notification_service import notify_ferrari_added
from app.services.vehicle_store import VehicleStore
from app.utils.logger import get_logger

logger = get_logger(__name__)

Notifier = Callable[[Vehicle], None]

# Optional sign and ASCII digits only: no whitespace, no "_" separators
YEAR_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class VehicleRules:
    allowed_colors: List[str] = field(default_factory=lambda: list(settings.ALLOWED_COLORS))
    max_age_years: int = settings.MAX_VEHICLE_AGE_YEARS
    protected_owner: str = settings.PROTECTED_OWNER
    notify_make: str = settings.NOTIFY_MAKE
    min_owner_length: int = 5
    min_field_length: int = 3


def _current_year() -> int:
    return datetime.now().year


class VehicleService:
    def __init__(
        self,
        session_factory: sessionmaker,
        rules: Optional[VehicleRules] = None,
        notifier: Optional[Notifier] = None,
        current_year: Callable[[], int] = _current_year,
    ):
        self.session_factory = session_factory
        self.rules = rules or VehicleRules()
        self.notifier = notifier or notify_ferrari_added
        self.current_year = current_year

    def list(self) -> List[Vehicle]:
        with self.session_factory() as db:
            return VehicleStore(db).list()

    def find_by_id(self, vehicle_id: int) -> Optional[Vehicle]:
        with self.session_factory() as db:
            return VehicleStore(db).find_by_id(vehicle_id)

    def add(self, vehicle: Vehicle) -> Vehicle:
        """Validate a new vehicle and insert it. Returns the stored record with its id."""
        with self.session_factory() as db:
            store = VehicleStore(db)

            if store.exists_by_plate(vehicle.plate):
                self._reject(vehicle, "Plate is already registered.")
            self._check_fields(vehicle)

            if (vehicle.make or "").lower() == self.rules.notify_make.lower():
                self._notify(vehicle)

            saved = store.insert(vehicle)
            logger.info(f"Vehicle added: id={saved.id} plate={saved.plate}")
            return saved

    def update(self, vehicle: Vehicle) -> None:
        """Validate and overwrite an existing vehicle. Plate uniqueness is not re-checked."""
        with self.session_factory() as db:
            store = VehicleStore(db)

            if store.find_by_id(vehicle.id) is None:
                self._reject(vehicle, "No vehicle exists with the given id.")
            self._check_fields(vehicle)

            store.update(vehicle)
            logger.info(f"Vehicle updated: id={vehicle.id} plate={vehicle.plate}")

    def delete(self, vehicle_id: int) -> None:
        """Delete a vehicle unless its owner is protected. Unknown ids are ignored."""
        with self.session_factory() as db:
            store = VehicleStore(db)

            existing = store.find_by_id(vehicle_id)
            protected = self.rules.protected_owner
            if existing is not None and (existing.owner or "").lower() == protected.lower():
                self._reject(existing, f"Cannot delete a vehicle owned by '{protected}'.")

            store.delete(vehicle_id)
            logger.info(f"Vehicle deleted: id={vehicle_id}")

    # ── Rules shared by add() and update() ───────────────────────────────

    def _check_fields(self, vehicle: Vehicle) -> None:
        rules = self.rules
        plate = vehicle.plate or ""
        make = vehicle.make or ""
        model = vehicle.model or ""

        if len((vehicle.owner or "").strip()) < rules.min_owner_length:
            self._reject(vehicle, f"Owner must be at least {rules.min_owner_length} characters long.")

        if min(len(make), len(model), len(plate)) < rules.min_field_length:
            self._reject(vehicle, f"Make, model and plate must be at least {rules.min_field_length} characters long.")

        if vehicle.color not in rules.allowed_colors:
            self._reject(vehicle, f"Color not allowed. Use: {', '.join(rules.allowed_colors)}.")

        # "model" carries the manufacture year; a model name like "Corolla" cannot pass
        if not YEAR_PATTERN.fullmatch(model):
            self._reject(vehicle, "Model must be a 4-digit manufacture year.")
        year = int(model)
        if year < self.current_year() - rules.max_age_years:
            self._reject(vehicle, f"Vehicle is more than {rules.max_age_years} years old.")

        if ";" in plate or "--" in make:
            self._reject(vehicle, "Invalid input: suspicious characters in plate or make.")

    def _notify(self, vehicle: Vehicle) -> None:
        try:
            self.notifier(vehicle)
        except Exception as e:
            logger.error(f"Notifier failed for plate {vehicle.plate}: {e}", exc_info=True)

    @staticmethod
    def _reject(vehicle: Vehicle, reason: str):
        logger.warning(f"Vehicle rejected (plate={vehicle.plate}): {reason}")
        raise ValidationError(reason)


def get_vehicle_service() -> VehicleService:
    """FastAPI dependency — service bound to the application's session factory."""
    return VehicleService(SessionLocal)
