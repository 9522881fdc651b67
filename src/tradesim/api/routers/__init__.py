"""API routers package."""

from tradesim.api.routers.accounts import router as accounts_router
from tradesim.api.routers.orders import router as orders_router
from tradesim.api.routers.portfolio import router as portfolio_router
from tradesim.api.routers.watchlist import router as watchlist_router

__all__ = [
    "accounts_router",
    "orders_router",
    "portfolio_router",
    "watchlist_router",
]
