from fastapi import APIRouter

from businesshours.api.v1.routers import business_hours as business_hours_router

router = APIRouter()

router.include_router(business_hours_router.router)
