# app/services/notification_service.py
"""
Notifications fired by the vehicle service.
Extend here to add push notifications, SMS, email, etc.
"""

from app.models.vehicle import Vehicle
from app.utils.logger import get_logger

logger = get_logger(__name__)


def notify_ferrari_added(vehicle: Vehicle) -> None:
    """Default notifier: a Ferrari was added to the registry."""
    logger.warning(f"[NOTIFY] A {vehicle.make} was added to the registry: plate {vehicle.plate}")
