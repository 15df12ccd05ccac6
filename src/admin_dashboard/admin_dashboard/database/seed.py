from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..container import Container

logger = logging.getLogger(__name__)


def seed_demo_data(container: "Container") -> None:
    """Insert a small demo data set through the services (skipped when data exists)."""

    if container.employee_service.list_all():
        logger.info("Demo seed skipped: employees already present")
        return

    first = container.employee_service.create(
        {
            "firstName": "Evelin",
            "lastName": "Garay",
            "email": "evelin.garay@example.com",
            "dni": "30111222",
            "entryTime": "08:00",
            "exitTime": "17:00",
            "hoursWorked": 160,
            "xLite": "A1",
        }
    )
    container.employee_service.create(
        {
            "firstName": "Marcos",
            "lastName": "Paz",
            "email": "marcos.paz@example.com",
            "dni": "28999000",
            "entryTime": "09:00",
            "exitTime": "18:00",
            "hoursWorked": 152,
            "xLite": "B2",
        }
    )
    container.break_schedule_service.save(
        {
            "employeeId": first.employee_id,
            "day": "Lunes",
            "startTime": "12:00",
            "endTime": "12:30",
            "week": 1,
            "month": 1,
            "year": 2025,
        }
    )
    user = container.user_service.create({"name": "Evelin Garay", "responses": 12, "nps": 9, "csat": 8, "rd": 7})
    container.nps_trimestral_service.record(user.user_id, {"month": "2025-01", "nps": 62})
    container.news_service.create(
        {"url": "https://example.com/novedades/1", "title": "Nuevo horario de breaks", "publishDate": "2025-01-06"}
    )
    logger.info("Demo seed ready")
