"""
Top‑level router for version 1 of the API.

This router aggregates the per-entity routers under a unified prefix.
When a new entity kind is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    adoptions,
    appointments,
    health_records,
    info,
    messages,
    notifications,
    payments,
    pets,
    prescriptions,
    users,
)

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(pets.router, prefix="/pets", tags=["pets"])
router.include_router(appointments.router, prefix="/appointments", tags=["appointments"])
router.include_router(health_records.router, prefix="/health-records", tags=["health-records"])
router.include_router(prescriptions.router, prefix="/prescriptions", tags=["prescriptions"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])
router.include_router(payments.router, prefix="/payments", tags=["payments"])
router.include_router(adoptions.router, prefix="/adoptions", tags=["adoptions"])
router.include_router(info.router, prefix="/info", tags=["info"])
