from contextlib import asynccontextmanager
from typing import Optional
from uuid import UUID

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from portfolio_tracker.api import auth, dashboard, investments, portfolios, recommendations, transactions, watchlist
from portfolio_tracker.core.config import AUTH_ENTRY_URL, CORS_ORIGINS, DASHBOARD_URL, LOG_LEVEL
from portfolio_tracker.core.logging import setup_logging
from portfolio_tracker.core.security import get_optional_user
from portfolio_tracker.database import create_db_and_tables

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(LOG_LEVEL)
    create_db_and_tables()
    yield

app = FastAPI(title="Portfolio Manager", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(dashboard.router)
app.include_router(portfolios.router)
app.include_router(investments.router)
app.include_router(transactions.router)
app.include_router(watchlist.router)
app.include_router(recommendations.router)

# Landing page: signed-in visitors go straight to their dashboard
@app.get("/")
def root(user_id: Optional[UUID] = Depends(get_optional_user)):
    if user_id is not None:
        return RedirectResponse(url=DASHBOARD_URL, status_code=307)
    return {
        "title": "Portfolio Manager",
        "message": "Track your investments, monitor performance, and manage your financial portfolio with ease",
        "get_started_url": AUTH_ENTRY_URL,
    }
