"""
业务服务模块
"""
from app.services.base_filter import PlacementFilter
from app.services.port_filter import PortFilter
from app.services.filter_service import FilterService

__all__ = [
    'PlacementFilter',
    'PortFilter',
    'FilterService',
]
