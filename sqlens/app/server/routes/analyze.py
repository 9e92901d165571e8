"""SQL analysis API routes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from sqlens.adapters import ErrorResponse
from sqlens.core import QueryAnalyzer

router = APIRouter()


class AnalyzeRequest(BaseModel):
    """Body of an analysis request."""

    sql: str | None = None


@router.post("/analyze")
def analyze(body: AnalyzeRequest, request: Request) -> JSONResponse:
    """
    Analyze a SELECT/WITH query.

    Returns the diagram (200) or a single error (400).
    """
    analyzer: QueryAnalyzer = request.app.state.analyzer
    result = analyzer.run(body.sql)
    status_code = 400 if isinstance(result, ErrorResponse) else 200
    return JSONResponse(status_code=status_code, content=result.to_dict())
