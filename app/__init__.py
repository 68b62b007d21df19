"""
端口过滤调度扩展

基于FastAPI的调度过滤服务：在调度需要绑定主机端口的容器时，
根据节点上已有容器声明和实际分配的端口，过滤出端口可用的节点。
"""

__version__ = "1.0.0"
__description__ = "端口过滤调度扩展是一个基于FastAPI的节点端口可用性过滤服务"
__author__ = "Edge Scheduler Team"
