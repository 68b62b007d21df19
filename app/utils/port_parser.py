"""端口范围解析工具"""
from typing import Optional, Tuple

from app.core.exceptions import PortRangeSyntaxError

MAX_PORT = 65535


def _parse_port(value: str, ports: str) -> int:
    """解析单个端口号，只接受0-65535之间的十进制数字"""
    if not value or not (value.isascii() and value.isdigit()):
        raise PortRangeSyntaxError(ports, f"{value!r} 不是有效的端口号")

    port = int(value)
    if port > MAX_PORT:
        raise PortRangeSyntaxError(ports, f"端口号 {port} 超出范围")
    return port


def parse_port_range(ports: Optional[str]) -> Tuple[int, int]:
    """解析端口或端口范围

    Args:
        ports: 端口字符串，例如 "8080" 或 "7000-7010"；空字符串表示未指定主机端口

    Returns:
        Tuple[int, int]: (起始端口, 结束端口)，未指定时返回 (0, 0)

    Raises:
        PortRangeSyntaxError: 字符串格式错误
    """
    if not ports:
        return 0, 0

    if "-" not in ports:
        port = _parse_port(ports, ports)
        return port, port

    start_text, _, end_text = ports.partition("-")
    start = _parse_port(start_text, ports)
    end = _parse_port(end_text, ports)
    if end < start:
        raise PortRangeSyntaxError(ports, "结束端口小于起始端口")
    return start, end
