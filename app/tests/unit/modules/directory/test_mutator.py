"""Unit tests for GroupMembershipMutator."""

from unittest.mock import patch

import pytest

from infrastructure.operations import OperationResult, OperationStatus
from modules.directory.domain.errors import TransportFailure
from modules.directory.domain.models import CollectionKind, Page
from modules.directory.mutator import GroupMembershipMutator
from tests.factories.directory import make_group, make_user


def _resolving_client(fake_client_factory, user=None, group=None):
    def first_page(query):
        if query.collection is CollectionKind.USERS:
            return Page(items=(user,) if user else ())
        return Page(items=(group,) if group else ())

    return fake_client_factory(first_page)


@pytest.mark.unit
class TestAddUserToGroup:
    """Test suite for GroupMembershipMutator.add_user_to_group()."""

    def test_success_issues_one_write(self, fake_client_factory):
        user, group = make_user(1), make_group(1)
        client = _resolving_client(fake_client_factory, user, group)

        result = GroupMembershipMutator(client).add_user_to_group(user.mail, group.mail)

        assert result.is_success
        assert result.data == {"group_id": group.id, "user_id": user.id}
        assert client.writes == [(group.id, user.id)]

    def test_unknown_user_aborts_without_write(self, fake_client_factory):
        client = _resolving_client(fake_client_factory, None, make_group(1))

        result = GroupMembershipMutator(client).add_user_to_group(
            "ghost@test.com", "group-name1@test.com"
        )

        assert result.is_not_found
        assert result.error_code == "USER_NOT_FOUND"
        assert "ghost@test.com" in result.message
        assert client.writes == []

    def test_unknown_group_aborts_without_write(self, fake_client_factory):
        client = _resolving_client(fake_client_factory, make_user(1), None)

        result = GroupMembershipMutator(client).add_user_to_group(
            "user-email1@test.com", "ghost-group@test.com"
        )

        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "GROUP_NOT_FOUND"
        assert client.writes == []

    def test_write_failure_returns_classified_result(self, fake_client_factory):
        user, group = make_user(1), make_group(1)
        client = _resolving_client(fake_client_factory, user, group)
        classified = OperationResult.error(
            OperationStatus.UNAUTHORIZED, "denied", error_code="FORBIDDEN"
        )
        client.write_error = TransportFailure("denied", response=classified)

        result = GroupMembershipMutator(client).add_user_to_group(user.mail, group.mail)

        assert result is classified
        assert len(client.writes) == 1

    def test_write_failure_without_response_is_permanent(self, fake_client_factory):
        user, group = make_user(1), make_group(1)
        client = _resolving_client(fake_client_factory, user, group)
        client.write_error = TransportFailure("socket closed")

        result = GroupMembershipMutator(client).add_user_to_group(user.mail, group.mail)

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "ADD_MEMBER_FAILED"
        assert len(client.writes) == 1

    def test_user_lookup_failure_returns_classified_result(
        self, mock_directory_client
    ):
        throttled = OperationResult.transient_error(
            "Too many requests", error_code="RATE_LIMITED", retry_after=30
        )
        mock_directory_client.fetch_page.side_effect = TransportFailure(
            "throttled", response=throttled
        )

        result = GroupMembershipMutator(mock_directory_client).add_user_to_group(
            "a@test.com", "b@test.com"
        )

        assert result is throttled
        assert result.status.is_retryable
        assert mock_directory_client.fetch_page.call_count == 1
        mock_directory_client.add_member_reference.assert_not_called()

    def test_group_lookup_failure_without_response_is_permanent(
        self, mock_directory_client
    ):
        user = make_user(1)
        mock_directory_client.fetch_page.side_effect = [
            Page(items=(user,)),
            TransportFailure("timeout"),
        ]

        result = GroupMembershipMutator(mock_directory_client).add_user_to_group(
            user.mail, "b@test.com"
        )

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "LOOKUP_FAILED"
        assert "timeout" in result.message
        mock_directory_client.add_member_reference.assert_not_called()

    def test_lookup_and_write_failures_share_result_shape(self, fake_client_factory):
        user, group = make_user(1), make_group(1)
        throttled = OperationResult.transient_error("throttled", retry_after=5)
        client = _resolving_client(fake_client_factory, user, group)
        client.write_error = TransportFailure("throttled", response=throttled)

        with patch("modules.directory.mutator.logger") as mock_logger:
            result = GroupMembershipMutator(client).add_user_to_group(
                user.mail, group.mail
            )

        assert isinstance(result, OperationResult)
        assert result.retry_after == 5
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.kwargs["retryable"] is True
