"""通用数据模型

字段别名与容器运行时 inspect 返回的JSON保持一致（HostIp、HostPort、PortBindings等），
同时允许使用Python字段名构造。
"""
from typing import Any, Dict, Iterator, List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

HOST_NETWORK_MODE = "host"


def _normalize_exposed_ports(value: Any) -> Any:
    """运行时以 {"80/tcp": {}} 的形式描述暴露端口，这里只保留端口键"""
    if value is None:
        return []
    if isinstance(value, dict):
        value = value.keys()
    return [str(port) for port in value]


class PortBinding(BaseModel):
    """端口绑定"""
    host_ip: str = Field("", alias="HostIp", description="绑定地址，空字符串或0.0.0.0表示所有网卡")
    host_port: str = Field("", alias="HostPort", description="主机端口或端口范围，空字符串表示动态分配")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "HostIp": "0.0.0.0",
                "HostPort": "8080"
            }
        }
    }

    @field_validator("host_ip", "host_port", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> Any:
        """允许以整数或null给出端口"""
        if v is None:
            return ""
        return str(v)


class HostConfig(BaseModel):
    """容器主机配置（声明的端口绑定）"""
    network_mode: str = Field("default", alias="NetworkMode", description="网络模式")
    port_bindings: Dict[str, List[PortBinding]] = Field(
        default_factory=dict, alias="PortBindings", description="容器端口到主机端口绑定的映射"
    )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "NetworkMode": "bridge",
                "PortBindings": {
                    "80/tcp": [{"HostIp": "0.0.0.0", "HostPort": "8080"}]
                }
            }
        }
    }

    @field_validator("port_bindings", mode="before")
    @classmethod
    def validate_port_bindings(cls, v: Any) -> Any:
        """运行时可能返回null"""
        return v or {}


class NetworkSettings(BaseModel):
    """容器网络状态（运行时实际分配的端口）"""
    ports: Dict[str, Optional[List[PortBinding]]] = Field(
        default_factory=dict, alias="Ports", description="容器端口到实际主机端口的映射，容器停止时为空"
    )

    model_config = {"populate_by_name": True}

    @field_validator("ports", mode="before")
    @classmethod
    def validate_ports(cls, v: Any) -> Any:
        return v or {}


class ContainerConfig(BaseModel):
    """待调度容器的配置"""
    name: Optional[str] = Field(None, description="容器名")
    exposed_ports: List[str] = Field(default_factory=list, alias="ExposedPorts", description="暴露的端口")
    host_config: HostConfig = Field(default_factory=HostConfig, alias="HostConfig")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "name": "web",
                "ExposedPorts": {"80/tcp": {}},
                "HostConfig": {
                    "NetworkMode": "bridge",
                    "PortBindings": {
                        "80/tcp": [{"HostIp": "", "HostPort": "8080"}]
                    }
                }
            }
        }
    }

    @field_validator("exposed_ports", mode="before")
    @classmethod
    def validate_exposed_ports(cls, v: Any) -> Any:
        return _normalize_exposed_ports(v)


class Container(BaseModel):
    """节点上已有的容器（运行中或已停止）"""
    id: str = Field("", alias="Id")
    name: str = Field("", alias="Name")
    exposed_ports: List[str] = Field(default_factory=list, alias="ExposedPorts")
    host_config: HostConfig = Field(default_factory=HostConfig, alias="HostConfig")
    network_settings: NetworkSettings = Field(default_factory=NetworkSettings, alias="NetworkSettings")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "Id": "3f4e8b1c",
                "Name": "nginx",
                "HostConfig": {
                    "NetworkMode": "bridge",
                    "PortBindings": {"80/tcp": [{"HostIp": "", "HostPort": ""}]}
                },
                "NetworkSettings": {
                    "Ports": {"80/tcp": [{"HostIp": "0.0.0.0", "HostPort": "32768"}]}
                }
            }
        }
    }

    @model_validator(mode="before")
    @classmethod
    def lift_inspect_config(cls, data: Any) -> Any:
        """inspect结果中暴露端口位于 Config.ExposedPorts"""
        if isinstance(data, dict) and "ExposedPorts" not in data and "exposed_ports" not in data:
            inspect_config = data.get("Config") or {}
            if "ExposedPorts" in inspect_config:
                data = {**data, "ExposedPorts": inspect_config["ExposedPorts"]}
        return data

    @field_validator("exposed_ports", mode="before")
    @classmethod
    def validate_exposed_ports(cls, v: Any) -> Any:
        return _normalize_exposed_ports(v)

    def is_host_network(self, host_mode: str = HOST_NETWORK_MODE) -> bool:
        """是否与节点共享网络命名空间"""
        return self.host_config.network_mode == host_mode

    def effective_bindings(self) -> Iterator[PortBinding]:
        """依次返回声明的绑定和实际分配的绑定

        两个来源需要同时检查：
        1. 未指定主机端口（例如 -p 80）时，声明的 HostPort 为空，只能从实际绑定中得知动态分配的端口；
        2. 指定了主机端口但容器已停止时，实际绑定为空，只能从声明的绑定中得知端口映射。
        """
        for bindings in self.host_config.port_bindings.values():
            yield from bindings
        for bindings in self.network_settings.ports.values():
            if bindings:
                yield from bindings


class Node(BaseModel):
    """节点信息"""
    id: str = Field("", alias="ID")
    name: str = Field(..., alias="Name")
    addr: Optional[str] = Field(None, alias="Addr", description="节点地址")
    containers: List[Container] = Field(default_factory=list, alias="Containers")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "ID": "node-1",
                "Name": "node-1",
                "Addr": "192.168.1.100:2375",
                "Containers": []
            }
        }
    }

