"""Flight search router — multi-airport search with stopover recommendations."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from stopfinder.schemas.flight import ErrorResponse, FlightSearchResponse
from stopfinder.schemas.search import FlightSearchRequest
from stopfinder.services.search_orchestrator import search_orchestrator

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/search",
    response_model=FlightSearchResponse,
    response_model_by_alias=True,
    responses={500: {"model": ErrorResponse}},
)
async def search_flights(req: FlightSearchRequest):
    """Search offers for every origin/destination combination, cheapest first."""
    try:
        return await search_orchestrator.search(req)
    except Exception as e:
        logger.error(f"Flight search {req.search_id or '-'} failed: {e}", exc_info=True)
        body = ErrorResponse(
            error="Search failed",
            message=str(e),
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
        return JSONResponse(status_code=500, content=body.model_dump(by_alias=True))
