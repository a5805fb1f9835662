"""News API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse

from news_api.models.news import ErrorResponse, NewsItem
from news_api.services.news_service import CORS_HEADERS, NewsService, get_news_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/news", tags=["news"])


@router.get(
    "",
    response_model=list[NewsItem],
    responses={500: {"model": ErrorResponse}},
)
def list_news(
    service: Annotated[NewsService, Depends(get_news_service)],
    limit: Annotated[int | None, Query(ge=1, le=1000, description="Max items to scan")] = None,
) -> JSONResponse:
    """List recently stored news records.

    Items come back in store order; there is no defined sort. Records that
    fail validation are reported the same way as a failed scan.
    """
    try:
        items = service.list_news(limit=limit)
        news = [NewsItem.model_validate(item) for item in items]
    except Exception as e:
        logger.error("Failed to fetch news: %s", e)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Failed to fetch news").model_dump(),
            headers=CORS_HEADERS,
        )

    return JSONResponse(
        content=[item.model_dump() for item in news],
        headers=CORS_HEADERS,
    )


@router.options("")
def news_options() -> Response:
    """CORS preflight."""
    return Response(status_code=200, headers=CORS_HEADERS)
