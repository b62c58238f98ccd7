import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from database import AsyncSessionLocal, init_db
from api.applicants import router as applicants_router
from api.applications import router as applications_router
from api.audit import router as audit_router
from api.statuses import router as statuses_router
from services.status_catalog import load_status_catalog
from utils.log import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_format)
    await init_db()
    async with AsyncSessionLocal() as session:
        app.state.status_catalog = await load_status_catalog(session)
    logger.info("Loaded %d application statuses", len(app.state.status_catalog))
    yield


app = FastAPI(
    title=settings.app_name,
    description="Loan application intake, status tracking and audit trail API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(applicants_router)
app.include_router(applications_router)
app.include_router(audit_router)
app.include_router(statuses_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
