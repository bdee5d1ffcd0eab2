"""API routers package."""

from rebalance_advisor.api.routers.profiles import router as profiles_router
from rebalance_advisor.api.routers.tolerances import router as tolerances_router
from rebalance_advisor.api.routers.portfolios import router as portfolios_router
from rebalance_advisor.api.routers.analysis import router as analysis_router

__all__ = [
    "profiles_router",
    "tolerances_router",
    "portfolios_router",
    "analysis_router",
]
