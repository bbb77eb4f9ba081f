"""Route registration helpers."""

from __future__ import annotations

from fastapi import APIRouter

from .plans import router as plans_router
from .portfolio import router as portfolio_router

api_router = APIRouter()
api_router.include_router(portfolio_router, prefix="/portfolio", tags=["portfolio"])
api_router.include_router(plans_router, prefix="/plans", tags=["plans"])

__all__ = ["api_router"]
