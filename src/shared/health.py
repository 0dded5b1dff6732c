from time import perf_counter

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from src.shared.infrastructure.database.session import DatabaseSessionFactory

router = APIRouter(tags=["Health"])


@router.get("/_health/db", status_code=status.HTTP_200_OK)
async def health_db(request: Request):
    db: DatabaseSessionFactory = request.app.state.db
    t0 = perf_counter()
    if await db.health_check():
        dt_ms = int((perf_counter() - t0) * 1000)
        return {"ok": True, "checks": {"db_select_1_ms": dt_ms}}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"ok": False, "checks": {"db": "SELECT 1 failed"}},
    )
