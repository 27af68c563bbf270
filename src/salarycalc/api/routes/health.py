from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from salarycalc.core.logging import get_logger
from salarycalc.db.session import get_session

router = APIRouter(prefix="/health", tags=["health"])
logger = get_logger(__name__)


@router.get("", summary="Liveness probe with a salary store round-trip")
def healthcheck(db: Session = Depends(get_session)) -> dict[str, str]:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("store_unavailable", step="healthcheck", error=str(exc))
        raise HTTPException(status_code=503, detail="Salary store unavailable") from exc
    return {"status": "ok", "store": "ok"}
