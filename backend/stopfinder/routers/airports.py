"""Airport router — region and neighbor expansion lookups."""

from fastapi import APIRouter, Query

from stopfinder.services.airport_expander import airport_expander

router = APIRouter()


@router.get("/expand/{code}")
async def expand_code(
    code: str,
    include_neighbors: bool = Query(False, alias="includeNeighbors"),
):
    """Airports a region or airport code searches from."""
    code = code.strip().upper()
    return {
        "code": code,
        "includeNeighbors": include_neighbors,
        "airports": airport_expander.expand(code, include_neighbors),
    }
