"""节点过滤API路由"""
from loguru import logger
from fastapi import APIRouter, HTTPException

from app.core.exceptions import PortRangeSyntaxError
from app.schemas.filter import FilterRequest, FilterResponse
from app.services.filter_service import FilterService


# 创建路由器
router = APIRouter(tags=["filter"])
filter_service = FilterService()


@router.post("/filter", response_model=FilterResponse)
async def filter_nodes(request: FilterRequest) -> FilterResponse:
    """
    过滤节点接口

    根据容器的端口需求和节点上已有容器的端口占用情况，过滤出端口可用的节点

    Args:
        request: 过滤请求，包含容器配置和候选节点列表

    Returns:
        过滤响应，包含符合条件的节点列表和不符合条件的节点及原因
    """
    logger.info(f"收到过滤请求: 容器={request.config.name}, 节点数量={len(request.nodes)}")

    try:
        filter_result = filter_service.filter_nodes(request)
    except PortRangeSyntaxError as e:
        logger.warning(f"端口范围格式错误: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error(f"过滤节点时发生错误: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"过滤节点失败: {str(e)}")

    response = FilterResponse(
        nodes=filter_result.nodes,
        node_names=filter_result.node_names,
        failed_nodes=filter_result.failed_nodes,
        error=filter_result.error
    )

    logger.info(
        f"过滤结果: 符合条件的节点数量={len(response.nodes)}, 不符合条件的节点数量={len(response.failed_nodes)}")
    return response
