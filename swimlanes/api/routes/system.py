from fastapi import APIRouter, Depends, Request
from fastapi.openapi.utils import get_openapi
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from swimlanes import __version__
from swimlanes.db.session import get_db
from swimlanes.schemas.system import SystemStats

router = APIRouter(prefix="/api/system", tags=["system"])


@router.get("/stats", response_model=SystemStats)
async def get_stats(db: AsyncSession = Depends(get_db)):
    """Return system-wide statistics."""
    sql = text("""
        SELECT
            (SELECT COUNT(*) FROM boards) AS boards,
            (SELECT COUNT(*) FROM columns) AS columns,
            (SELECT COUNT(*) FROM cards WHERE archived_at IS NULL) AS cards,
            (SELECT COUNT(*) FROM cards WHERE archived_at IS NOT NULL) AS archived_cards
    """)
    result = await db.execute(sql)
    return result.mappings().first()


@router.get("/docs.json", include_in_schema=False)
async def get_openapi_json(request: Request):
    """Return the full OpenAPI schema in JSON format."""
    app = request.app
    return get_openapi(
        title="Swimlanes API",
        version=__version__,
        description="Full OpenAPI specification for the Swimlanes kanban backend.",
        routes=app.routes,
    )
