"""
API v1 Router

All API endpoints for the frontend.
"""

from fastapi import APIRouter

from stockpredict.api.v1.endpoints import stocks, predict, history

router = APIRouter()

# Include all endpoint routers
router.include_router(stocks.router, prefix="/stocks", tags=["Stocks"])
router.include_router(predict.router, prefix="/predict", tags=["Prediction"])
router.include_router(history.router, prefix="/history", tags=["History"])
