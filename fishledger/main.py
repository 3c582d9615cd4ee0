from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import calculations

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("fishledger")

app = FastAPI(
    title="Fish Ledger",
    description="Weight deduction and commission calculator for fish wholesale market transactions",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(calculations.router, prefix="/api")

logger.info("Default deduction method %s (%.2f%%), commission %.2f%%",
            settings.DEFAULT_DEDUCTION_METHOD,
            settings.DEFAULT_DEDUCTION_PERCENT,
            settings.DEFAULT_COMMISSION_PERCENT)


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}
