"""节点过滤数据模型"""
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from app.schemas.common import ContainerConfig, Node


class FilterResult(BaseModel):
    """过滤结果"""
    nodes: List[Node] = Field(default_factory=list)
    node_names: List[str] = Field(default_factory=list)
    failed_nodes: Dict[str, str] = Field(default_factory=dict)
    error: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "nodes": [],
                "node_names": [],
                "failed_nodes": {},
                "error": None
            }
        }
    }


class FilterRequest(BaseModel):
    """过滤请求"""
    config: ContainerConfig
    nodes: List[Node] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "config": {
                    "ExposedPorts": {"80/tcp": {}},
                    "HostConfig": {
                        "NetworkMode": "bridge",
                        "PortBindings": {"80/tcp": [{"HostIp": "", "HostPort": "8080"}]}
                    }
                },
                "nodes": [
                    {"Name": "node-1", "Containers": []}
                ]
            }
        }
    }


class FilterResponse(BaseModel):
    """过滤响应"""
    nodes: List[Node] = Field(default_factory=list)
    node_names: List[str] = Field(default_factory=list)
    failed_nodes: Dict[str, str] = Field(default_factory=dict)
    error: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "nodes": [],
                "node_names": ["node-1"],
                "failed_nodes": {"node-2": "端口已被占用"},
                "error": None
            }
        }
    }
