"""应用入口模块"""
import sys
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi_offline import FastAPIOffline
from loguru import logger

from app.api.v1 import register_routers
from app.core.config import settings


def configure_logging() -> None:
    """按配置的日志级别重新设置日志输出"""
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    应用生命周期管理

    过滤服务无状态，启动和关闭时只记录日志
    """
    configure_logging()
    logger.info("端口过滤调度扩展启动中...")
    logger.info(f"应用名称: {settings.APP_NAME}")
    logger.info(f"版本: {settings.APP_VERSION}")
    logger.info(f"host网络模式名: {settings.HOST_NETWORK_MODE}")
    yield
    logger.info("应用已关闭")


# 创建FastAPI应用
app = FastAPIOffline(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    redoc_url=f"{settings.API_V1_PREFIX}/redoc",
    lifespan=lifespan,
)

# 配置CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# 注册API路由
register_routers(app)

# 请求中间件
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """记录所有HTTP请求"""
    logger.info(f"请求: {request.method} {request.url.path}")
    response = await call_next(request)
    logger.info(f"响应: {request.method} {request.url.path} - {response.status_code}")
    return response


@app.get("/")
async def root():
    """根路由，返回应用信息"""
    return {
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """健康检查接口"""
    return {"status": "healthy"}


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    全局异常处理
    """
    error_detail = str(exc)
    logger.error(f"全局异常: {error_detail}")
    logger.error(traceback.format_exc())

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": "服务器内部错误",
            "detail": error_detail
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
