"""
数据模型模块
"""
from app.schemas.common import (
    PortBinding, HostConfig, NetworkSettings, ContainerConfig, Container, Node
)
from app.schemas.filter import FilterRequest, FilterResponse, FilterResult

__all__ = [
    # Common models
    'PortBinding', 'HostConfig', 'NetworkSettings', 'ContainerConfig', 'Container', 'Node',

    # Filter models
    'FilterRequest', 'FilterResponse', 'FilterResult',
]
