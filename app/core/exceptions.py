"""端口过滤异常模块

过滤过程中的错误都是终止性的：出现任一异常时不返回部分结果，也不重试，
由调用方（调度器）决定是否基于新的节点快照重新调度。
"""
from typing import Optional

__all__ = [
    "PortFilterError",
    "PortRangeSyntaxError",
    "NoEligibleNodeError",
]


class PortFilterError(Exception):
    """端口过滤错误基类

    Attributes:
        message: 可读的错误描述
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PortRangeSyntaxError(PortFilterError, ValueError):
    """端口或端口范围字符串无法解析"""

    def __init__(self, ports: str, reason: Optional[str] = None):
        message = f"无效的端口范围: {ports!r}"
        if reason:
            message = f"{message}，{reason}"
        super().__init__(message)
        self.ports = ports


class NoEligibleNodeError(PortFilterError):
    """针对某个端口需求过滤后没有剩余节点"""

    def __init__(self, port: str, host_mode: bool = False):
        if host_mode:
            message = f"无法找到端口 {port} 可用的节点（host网络模式）"
        else:
            message = f"无法找到端口 {port} 可用的节点"
        super().__init__(message)
        self.port = port
        self.host_mode = host_mode
