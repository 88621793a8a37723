"""Tests for the AWS Organizations account directory."""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from awsid.aws_clients.manager import AWSClientManager, OrganizationsAccountDirectory

from tests.fixtures.accounts import sample_remote_accounts  # noqa: F401


class TestAWSClientManager:
    @patch("awsid.aws_clients.manager.boto3.Session")
    def test_session_uses_profile_and_region(self, mock_session):
        manager = AWSClientManager(profile="org-admin", region="us-east-1")

        mock_session.assert_called_once_with(profile_name="org-admin", region_name="us-east-1")
        assert manager.session is mock_session.return_value

    @patch("awsid.aws_clients.manager.boto3.Session")
    def test_session_without_profile(self, mock_session):
        AWSClientManager()

        mock_session.assert_called_once_with()

    @patch("awsid.aws_clients.manager.boto3.Session")
    def test_get_organizations_client(self, mock_session):
        manager = AWSClientManager()

        client = manager.get_organizations_client()

        mock_session.return_value.client.assert_called_once_with("organizations")
        assert client is mock_session.return_value.client.return_value


class TestOrganizationsAccountDirectory:
    def _directory(self, pages):
        client = MagicMock()
        client.get_paginator.return_value.paginate.return_value = pages
        manager = MagicMock()
        manager.get_organizations_client.return_value = client
        return OrganizationsAccountDirectory(manager), client

    def test_list_accounts_collects_all_pages(self, sample_remote_accounts):
        directory, client = self._directory(
            [{"Accounts": sample_remote_accounts[:2]}, {"Accounts": sample_remote_accounts[2:]}]
        )

        accounts = directory.list_accounts()

        client.get_paginator.assert_called_once_with("list_accounts")
        assert accounts == sample_remote_accounts

    def test_list_accounts_empty_page(self):
        directory, _ = self._directory([{}])

        assert directory.list_accounts() == []

    def test_client_error_propagates(self):
        directory, client = self._directory([])
        client.get_paginator.return_value.paginate.side_effect = ClientError(
            {"Error": {"Code": "AWSOrganizationsNotInUseException", "Message": "no org"}},
            "ListAccounts",
        )

        with pytest.raises(ClientError):
            directory.list_accounts()
