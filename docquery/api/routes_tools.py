"""Query operations exposed as tool-call routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from docquery.api.dependencies import get_engine
from docquery.services.content.engine import ContentEngine
from docquery.services.content.models import OperationResult

MAX_QUERY_LEN = 500

router = APIRouter(prefix="/tools", tags=["tools"])


class SearchRequest(BaseModel):
    query: str = Field(..., min_length=1, max_length=MAX_QUERY_LEN)
    context_lines: int | None = Field(
        default=None, ge=0, description="Lines of context around each match"
    )


class SectionRequest(BaseModel):
    section_title: str = Field(..., min_length=1, max_length=MAX_QUERY_LEN)
    include_subsections: bool | None = Field(
        default=None, description="Include content under subsections"
    )


class FullContentRequest(BaseModel):
    max_length: int | None = Field(default=None, ge=0, description="Maximum characters to return")


class ToolResponse(BaseModel):
    ok: bool
    tool: str
    text: str


def _respond(tool: str, result: OperationResult) -> ToolResponse:
    return ToolResponse(ok=not result.is_error, tool=tool, text=result.text)


EngineDep = Annotated[ContentEngine, Depends(get_engine)]


@router.post("/search_content", response_model=ToolResponse, status_code=status.HTTP_200_OK)
async def search_content(payload: SearchRequest, engine: EngineDep) -> ToolResponse:
    """Search for a term and return each match with surrounding lines."""
    result = await engine.search_content(payload.query, payload.context_lines)
    return _respond("search_content", result)


@router.post("/get_section", response_model=ToolResponse)
async def get_section(payload: SectionRequest, engine: EngineDep) -> ToolResponse:
    """Return the section under the first heading containing the title."""
    result = await engine.get_section(payload.section_title, payload.include_subsections)
    return _respond("get_section", result)


@router.post("/get_full_content", response_model=ToolResponse)
async def get_full_content(
    engine: EngineDep, payload: FullContentRequest | None = None
) -> ToolResponse:
    max_length = payload.max_length if payload else None
    return _respond("get_full_content", await engine.get_full_content(max_length))


@router.post("/get_content_summary", response_model=ToolResponse)
async def get_content_summary(engine: EngineDep) -> ToolResponse:
    return _respond("get_content_summary", await engine.get_content_summary())
