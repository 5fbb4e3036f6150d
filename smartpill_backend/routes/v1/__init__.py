from fastapi import APIRouter
from . import auth, hello, medications, consumption_report

router = APIRouter(prefix="/api/v1", tags=["v1"])

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(hello.router, tags=["hello"])
router.include_router(medications.router, prefix="/medications", tags=["medications"])
router.include_router(consumption_report.router, prefix="/consumption-report", tags=["consumption-report"])
