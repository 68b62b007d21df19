"""
API v1版本路由
"""
from fastapi import FastAPI, APIRouter
from app.api.v1 import filter
from app.core.config import settings

# 所有路由模块列表
api_modules = [filter]

def register_routers(app: FastAPI, prefix: str = "") -> None:
    """
    注册所有API路由

    Args:
        app: FastAPI应用实例
        prefix: 路由前缀，默认使用settings.API_V1_STR
    """
    # 使用传入的前缀或默认前缀
    if not prefix:
        prefix = settings.API_V1_STR

    main_router = APIRouter()

    for module in api_modules:
        if hasattr(module, 'router'):
            main_router.include_router(module.router)

    app.include_router(main_router, prefix=prefix)
