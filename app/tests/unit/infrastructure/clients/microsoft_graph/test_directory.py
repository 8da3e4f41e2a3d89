"""Unit tests for GraphDirectoryClient."""

import pytest

from infrastructure.clients.microsoft_graph.directory import GraphDirectoryClient
from infrastructure.operations.status import OperationStatus

BASE_URL = "https://graph.microsoft.com/v1.0"


@pytest.fixture
def client(mock_graph_session_provider):
    return GraphDirectoryClient(mock_graph_session_provider, base_url=BASE_URL + "/")


@pytest.mark.unit
class TestGraphDirectoryClientPages:
    def test_list_users_page_params(self, client, mock_graph_session):
        payload = {"value": [{"id": "u1"}]}
        mock_graph_session.get.return_value = mock_graph_session.make_response(payload)

        result = client.list_users_page(
            "mail eq 'a@test.com'", select=["id", "mail"], top=10
        )

        assert result.is_success
        assert result.data == payload
        mock_graph_session.get.assert_called_once_with(
            f"{BASE_URL}/users",
            params={"$filter": "mail eq 'a@test.com'", "$select": "id,mail", "$top": 10},
            timeout=30.0,
        )

    def test_list_groups_page_without_filter(self, client, mock_graph_session):
        mock_graph_session.get.return_value = mock_graph_session.make_response(
            {"value": []}
        )

        client.list_groups_page()

        mock_graph_session.get.assert_called_once_with(
            f"{BASE_URL}/groups", params={}, timeout=30.0
        )

    def test_list_members_page_quotes_group_id(self, client, mock_graph_session):
        mock_graph_session.get.return_value = mock_graph_session.make_response(
            {"value": []}
        )

        client.list_members_page("a/b", select=["id"])

        url = mock_graph_session.get.call_args.args[0]
        assert url == f"{BASE_URL}/groups/a%2Fb/members"

    def test_list_next_page_requests_link_as_is(self, client, mock_graph_session):
        link = f"{BASE_URL}/groups/g0/members?$skiptoken=xyz"
        mock_graph_session.get.return_value = mock_graph_session.make_response(
            {"value": []}
        )

        client.list_next_page(link)

        mock_graph_session.get.assert_called_once_with(link, params=None, timeout=30.0)

    def test_session_and_response_released(self, client, mock_graph_session):
        response = mock_graph_session.make_response({"value": []})
        mock_graph_session.get.return_value = response

        client.list_users_page()

        mock_graph_session.__exit__.assert_called_once()
        response.__exit__.assert_called_once()

    def test_http_error_classified(
        self, client, mock_graph_session, make_http_error
    ):
        mock_graph_session.get.return_value = mock_graph_session.make_response(
            error=make_http_error(403, message="Insufficient privileges")
        )

        result = client.list_users_page()

        assert result.status == OperationStatus.UNAUTHORIZED
        assert result.error_code == "FORBIDDEN"


@pytest.mark.unit
class TestGraphDirectoryClientAddMember:
    def test_add_member_reference_body(self, client, mock_graph_session):
        mock_graph_session.post.return_value = mock_graph_session.make_response()

        result = client.add_member_reference("g0", "u1")

        assert result.is_success
        mock_graph_session.post.assert_called_once_with(
            f"{BASE_URL}/groups/g0/members/$ref",
            json={"@odata.id": f"{BASE_URL}/directoryObjects/u1"},
            timeout=30.0,
        )

    def test_add_member_reference_not_retried(
        self, client, mock_graph_session, make_http_error
    ):
        mock_graph_session.post.return_value = mock_graph_session.make_response(
            error=make_http_error(503)
        )

        result = client.add_member_reference("g0", "u1")

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert mock_graph_session.post.call_count == 1
