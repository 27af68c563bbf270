from fastapi import FastAPI

from salarycalc.api.routes import health, salaries
from salarycalc.core.config import get_settings
from salarycalc.core.logging import configure_logging, get_logger
from salarycalc.core.monitoring import configure_error_monitoring

settings = get_settings()
configure_logging(settings.log_level)
configure_error_monitoring(settings)
logger = get_logger(__name__)

app = FastAPI(title=settings.app_name)

app.include_router(health.router)
app.include_router(salaries.router)


@app.on_event("startup")
def startup_event() -> None:
    logger.info("startup_complete", env=settings.env)


@app.get("/")
def root() -> dict[str, str]:
    return {"message": "Salary calculation API running", "environment": settings.env}
