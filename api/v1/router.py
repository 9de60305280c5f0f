# api/v1/router.py
from fastapi import APIRouter

from . import bmi, recs

api_router = APIRouter()

api_router.include_router(bmi.router, prefix="/bmi", tags=["BMI"])
api_router.include_router(recs.router, prefix="/recommendations", tags=["Recommendations"])
