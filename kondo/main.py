import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from kondo.core.config import get_log_level
from kondo.errors import KondoError
from kondo.routes.alerts import router as alerts_router
from kondo.routes.dashboard import router as dashboard_router
from kondo.routes.incidents import router as incidents_router
from kondo.routes.me import router as me_router
from kondo.routes.users import router as users_router

logging.basicConfig(level=get_log_level())
logger = logging.getLogger("kondo")

app = FastAPI(title="Kondo API")

app.include_router(me_router)
app.include_router(incidents_router)
app.include_router(alerts_router)
app.include_router(dashboard_router)
app.include_router(users_router)


@app.exception_handler(KondoError)
async def handle_domain_error(request: Request, exc: KondoError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


# ---------- Ruta de salud ----------
@app.get("/")
def health_check():
    return {"status": "ok"}
