import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from .config import settings
from .api import lists
from .exceptions import MalformedPayloadError
from .storage.task_store import TaskStore

# 配置日志
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 To-Do List API 启动")
    logger.info(f"📋 已有清单数: {len(app.state.store.list_names())}")
    yield
    # 内存数据随进程退出丢弃
    logger.info("👋 To-Do List API 关闭")


async def malformed_payload_handler(request: Request, exc: RequestValidationError):
    """请求体校验失败统一返回 400"""
    error = MalformedPayloadError("Malformed request body")
    logger.warning(f"请求体无法解析: {request.method} {request.url.path}")
    return JSONResponse(
        status_code=error.status_code,
        content={"detail": str(error), "errors": jsonable_encoder(exc.errors())},
    )


def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    """创建应用，未传入 store 时新建一个空的 TaskStore"""
    app = FastAPI(
        title=settings.app_name,
        description="内存多清单待办事项服务",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.store = store if store is not None else TaskStore()

    # CORS 配置
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, malformed_payload_handler)

    # 路由注册
    app.include_router(lists.router)

    @app.get("/", summary="服务信息", tags=["系统"])
    async def root():
        """获取 API 服务信息"""
        return {"message": "To-Do List API is running", "version": "1.0.0"}

    @app.get("/health", summary="健康检查", tags=["系统"])
    async def health():
        """检查服务健康状态"""
        return {"status": "healthy"}

    return app


app = create_app()


def run():
    import uvicorn
    # 数据保存在进程内存中，只能单 worker 运行
    uvicorn.run(
        "todolist.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
