"""Module: api."""

# backend/dogiguard/api/v1/api.py
from fastapi import APIRouter

# Core operational routes.
from dogiguard.api.v1.routes.health import router as health_router

# Domain routes used by the mobile app.
from dogiguard.api.v1.routes.pets import router as pets_router
from dogiguard.api.v1.routes.medication_records import router as medication_records_router


api_router = APIRouter()

# Register operational endpoints first for service-level concerns.
api_router.include_router(health_router, prefix="/health", tags=["health"])

# Register business/domain endpoints consumed by the application UI.
api_router.include_router(pets_router, prefix="/pets", tags=["pets"])
# Record routes span /pets/{pet_id}/... and /medication-records/..., so no shared prefix.
api_router.include_router(medication_records_router, tags=["medication-records"])
