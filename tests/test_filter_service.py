"""节点过滤服务测试"""
import pytest

from app.core.exceptions import PortRangeSyntaxError
from app.schemas.filter import FilterRequest
from app.services.filter_service import FilterService
from tests.utils import bridge_request, host_request, make_container, make_node


@pytest.fixture
def filter_service() -> FilterService:
    return FilterService()


class TestFilterService:

    def setup_method(self):
        self.nodes = [
            make_node("node-1", make_container(declared={"80/tcp": [{"HostIp": "", "HostPort": "8080"}]})),
            make_node("node-2"),
        ]

    def test_eligible_nodes(self, filter_service):
        request = FilterRequest(config=bridge_request({"HostIp": "", "HostPort": "8080"}), nodes=self.nodes)
        result = filter_service.filter_nodes(request)

        assert result.error is None
        assert result.node_names == ["node-2"]
        assert [node.name for node in result.nodes] == ["node-2"]
        assert list(result.failed_nodes) == ["node-1"]

    def test_all_nodes_pass(self, filter_service):
        request = FilterRequest(config=bridge_request({"HostIp": "", "HostPort": "9090"}), nodes=self.nodes)
        result = filter_service.filter_nodes(request)

        assert result.node_names == ["node-1", "node-2"]
        assert result.failed_nodes == {}

    def test_no_eligible_node_sets_error(self, filter_service):
        request = FilterRequest(config=bridge_request({"HostIp": "", "HostPort": "8080"}), nodes=self.nodes[:1])
        result = filter_service.filter_nodes(request)

        assert result.nodes == []
        assert result.node_names == []
        assert "8080" in result.error
        assert result.failed_nodes == {"node-1": result.error}

    def test_host_mode_error(self, filter_service):
        nodes = [make_node("node-1", make_container(network_mode="host", exposed_ports=["80/tcp"]))]
        result = filter_service.filter_nodes(FilterRequest(config=host_request("80/tcp"), nodes=nodes))

        assert "host" in result.error

    def test_syntax_error_propagates(self, filter_service):
        request = FilterRequest(config=bridge_request({"HostIp": "", "HostPort": "abc"}), nodes=self.nodes)
        with pytest.raises(PortRangeSyntaxError):
            filter_service.filter_nodes(request)

    def test_duplicate_node_names(self, filter_service):
        """同名节点按节点ID区分"""
        nodes = [
            make_node("n", make_container(declared={"80/tcp": [{"HostIp": "", "HostPort": "8080"}]})),
            make_node("n"),
        ]
        nodes[0].id = "id-1"
        nodes[1].id = "id-2"
        request = FilterRequest(config=bridge_request({"HostIp": "", "HostPort": "8080"}), nodes=nodes)
        result = filter_service.filter_nodes(request)

        assert [node.id for node in result.nodes] == ["id-2"]
        assert list(result.failed_nodes) == ["id-1"]
