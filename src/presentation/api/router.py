from fastapi import APIRouter

from .callback import callback_router
from .health import health_router
from .payment import payment_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(payment_router, tags=["Payments"])
router.include_router(callback_router, tags=["Callbacks"])
