# oilmart/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from oilmart.core.auth import AdminRequired
from oilmart.core.config import get_settings

# Routers
from oilmart.routers.home import router as home_router
from oilmart.routers.admin_coupons import router as admin_coupons_router
from oilmart.routers.admin_orders import router as admin_orders_router
from oilmart.routers.admin_products import router as admin_products_router
from oilmart.routers.admin_users import router as admin_users_router

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Report which Supabase project the store clients will use.
      - Warn when the back office cannot work (no service role key).

    Shutdown:
      - No special cleanup needed; Supabase clients are stateless HTTP.
    """
    logger.info("🔄 Startup: OilMart using Supabase project %s", settings.SUPABASE_URL)
    if not settings.SUPABASE_SERVICE_ROLE_KEY:
        logger.warning("⚠️ Startup: SUPABASE_SERVICE_ROLE_KEY missing, admin pages will fail.")
    yield


app = FastAPI(
    title=settings.PROJECT_NAME or "OilMart API",
    version="0.1.0",
    lifespan=lifespan,
)


# --- CORS configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AdminRequired)
async def redirect_non_admin(request: Request, exc: AdminRequired):
    """Admin gate: send non-admin sessions to the site root, nothing else."""
    return RedirectResponse(url=exc.location, status_code=303)


# Versioned API prefix, e.g. /api/v1
app.include_router(home_router, prefix=settings.API_V1_STR)
app.include_router(admin_coupons_router, prefix=settings.API_V1_STR)
app.include_router(admin_orders_router, prefix=settings.API_V1_STR)
app.include_router(admin_products_router, prefix=settings.API_V1_STR)
app.include_router(admin_users_router, prefix=settings.API_V1_STR)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "oilmart-backend"}
