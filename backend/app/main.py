"""FastAPI entry point for the Museum Visit Reporting backend."""
import logging

from app.config import get_settings

# 必须在导入 deps 之前配置日志，deps 导入时会输出后端选择信息
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

from fastapi import FastAPI, Request  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402

from domain.errors import StoreUnavailable  # noqa: E402
from interfaces import deps  # noqa: E402
from interfaces import report_router, visit_router  # noqa: E402

logger = logging.getLogger(__name__)

app = FastAPI(title="Museum Visit Reporting System")

app.include_router(visit_router)
app.include_router(report_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=deps.settings.allow_origins,  # 支持前端在不同端口运行
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StoreUnavailable)
async def _store_unavailable(request: Request, exc: StoreUnavailable) -> JSONResponse:
    logger.error("[main] %s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.get("/health", tags=["health"])
def health_check() -> dict:
    """Expose a minimal health endpoint to help dev tooling."""
    return {"status": "ok", "configVersion": deps.settings.version}
