from fastapi import APIRouter

from twocents.config import settings
from twocents.db.connection import metrics_db

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "database": metrics_db.status(),
        "simulation": {
            "fixed_income_participation_percent": settings.FIXED_INCOME_PARTICIPATION_PERCENT,
            "savings_zero_rate_policy": settings.SAVINGS_ZERO_RATE_POLICY,
        },
    }
