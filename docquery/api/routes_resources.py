"""Article listing resources."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from docquery.api.dependencies import get_engine
from docquery.api.routes_tools import ToolResponse
from docquery.services.content.engine import ContentEngine

router = APIRouter(prefix="/resources", tags=["resources"])


@router.get("/articles")
async def articles(engine: Annotated[ContentEngine, Depends(get_engine)]) -> dict[str, Any]:
    """JSON listing of every article with the distinct years present.

    A fetch failure yields an empty listing with an ``error`` message.
    """
    return await engine.get_articles()


@router.get("/articles/summary", response_model=ToolResponse)
async def articles_summary(
    engine: Annotated[ContentEngine, Depends(get_engine)],
) -> ToolResponse:
    result = await engine.get_articles_summary()
    return ToolResponse(ok=not result.is_error, tool="articles_summary", text=result.text)
