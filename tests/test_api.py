"""过滤API测试"""
from app.core.config import settings

FILTER_URL = f"{settings.API_V1_STR}/filter"


def _request(host_port: str, nodes):
    return {
        "config": {
            "name": "web",
            "ExposedPorts": {"80/tcp": {}},
            "HostConfig": {
                "NetworkMode": "bridge",
                "PortBindings": {"80/tcp": [{"HostIp": "", "HostPort": host_port}]},
            },
        },
        "nodes": nodes,
    }


NODES = [
    {
        "Name": "node-1",
        "Containers": [{
            "Name": "nginx",
            "HostConfig": {"NetworkMode": "bridge", "PortBindings": {"80/tcp": [{"HostIp": "", "HostPort": ""}]}},
            "NetworkSettings": {"Ports": {"80/tcp": [{"HostIp": "0.0.0.0", "HostPort": "8080"}]}},
        }],
    },
    {"Name": "node-2", "Containers": []},
]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["app"] == settings.APP_NAME


def test_filter_nodes(client):
    response = client.post(FILTER_URL, json=_request("8080", NODES))

    assert response.status_code == 200
    body = response.json()
    assert body["node_names"] == ["node-2"]
    assert body["error"] is None
    assert "node-1" in body["failed_nodes"]


def test_filter_no_eligible_node(client):
    response = client.post(FILTER_URL, json=_request("8080", NODES[:1]))

    assert response.status_code == 200
    body = response.json()
    assert body["node_names"] == []
    assert "8080" in body["error"]


def test_filter_malformed_port(client):
    response = client.post(FILTER_URL, json=_request("abc", NODES))

    assert response.status_code == 400
    assert "abc" in response.json()["detail"]


def test_filter_invalid_body(client):
    response = client.post(FILTER_URL, json={"nodes": []})
    assert response.status_code == 422


def test_filter_host_mode_inspect_payload(client):
    """节点容器以inspect结构提交时，host模式端口冲突仍被检测"""
    payload = {
        "config": {"ExposedPorts": {"80/tcp": {}}, "HostConfig": {"NetworkMode": "host"}},
        "nodes": [
            {
                "Name": "node-1",
                "Containers": [{
                    "Name": "web",
                    "Config": {"ExposedPorts": {"80/tcp": {}}},
                    "HostConfig": {"NetworkMode": "host"},
                }],
            },
            {"Name": "node-2", "Containers": []},
        ],
    }
    response = client.post(FILTER_URL, json=payload)

    assert response.status_code == 200
    assert response.json()["node_names"] == ["node-2"]
