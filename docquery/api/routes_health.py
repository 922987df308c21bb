"""Health and readiness routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from docquery.api.dependencies import get_engine
from docquery.services.content.engine import ContentEngine
from docquery.services.content.models import FetchFailure

router = APIRouter()


@router.get("/health")
def health() -> dict[str, str]:
    """Simple liveness probe."""
    return {"status": "ok"}


@router.get("/ready")
async def ready(engine: Annotated[ContentEngine, Depends(get_engine)]) -> dict[str, str]:
    """
    Readiness probe.

    Loads the primary document through the cache; fails if it cannot be fetched.
    """
    try:
        await engine.load_content()
    except FetchFailure as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return {"status": "ok"}
