"""FastAPI application for the court booking service."""
import logging

from fastapi import FastAPI

from courtbook.api.router import api_router
from courtbook.core.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)
app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/health")
def health():
    return {"status": "healthy", "environment": settings.environment}


logger.info("%s started (%d courts)", settings.app_name, len(settings.courts))
