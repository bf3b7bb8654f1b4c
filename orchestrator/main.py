"""
FastAPI 服务入口
"""
import logging
from contextlib import asynccontextmanager
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from orchestrator.config import get_settings
from orchestrator.query_context import QueryContext
from orchestrator.scanner import ScanOrchestrator
from tools.filesystem_tool import FileSystemGateway

# 配置日志
logging.basicConfig(
    level=getattr(logging, get_settings().LOG_LEVEL),
    format=get_settings().LOG_FORMAT
)
logger = logging.getLogger(__name__)


class CrashLogsResponse(BaseModel):
    """扫描结果"""
    count: int
    rows: List[Dict[str, str]]


def get_scanner() -> ScanOrchestrator:
    """创建扫描器"""
    return ScanOrchestrator(
        fs_gateway=FileSystemGateway(encoding=get_settings().READ_ENCODING)
    )


# 生命周期管理
@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    logger.info(f"Starting {get_settings().APP_NAME}...")
    yield
    logger.info(f"Shutting down {get_settings().APP_NAME}...")


app = FastAPI(
    title=get_settings().APP_NAME,
    description="macOS crash report 字段提取服务",
    version=get_settings().APP_VERSION,
    lifespan=lifespan
)


@app.get("/")
async def root():
    """根路径"""
    return {
        "name": get_settings().APP_NAME,
        "version": get_settings().APP_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """健康检查"""
    return {"status": "healthy"}


@app.get("/api/v1/crashes", response_model=CrashLogsResponse)
def list_crashes(uid: Optional[List[str]] = Query(default=None)):
    """
    扫描 crash 日志

    uid 可重复，作为 uid 列的等值约束
    """
    try:
        rows = get_scanner().scan(QueryContext.from_uids(uid))
    except Exception as e:
        logger.error(f"Crash scan failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return CrashLogsResponse(count=len(rows), rows=rows)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "orchestrator.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
