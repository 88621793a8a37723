"""AWS client utilities for awsid."""

import logging
from typing import Any, Dict, List, Optional

import boto3

logger = logging.getLogger(__name__)


class AWSClientManager:
    """Manages the AWS session used to reach AWS Organizations."""

    def __init__(self, profile: Optional[str] = None, region: Optional[str] = None):
        """
        Initialize the AWS client manager.

        Args:
            profile: AWS profile name to use
            region: AWS region to use
        """
        self.profile = profile
        self.region = region
        self.session = None
        self._init_session()

    def _init_session(self) -> None:
        """Initialize the AWS session."""
        session_kwargs = {}
        if self.profile:
            session_kwargs["profile_name"] = self.profile
        if self.region:
            session_kwargs["region_name"] = self.region

        self.session = boto3.Session(**session_kwargs)
        logger.debug(
            f"Created AWS session: profile={self.profile or 'default'}, "
            f"region={self.region or self.session.region_name or 'default'}"
        )

    def get_client(self, service_name: str) -> Any:
        """
        Get an AWS service client.

        Args:
            service_name: Name of the AWS service

        Returns:
            AWS service client
        """
        if self.session is None:
            raise RuntimeError("Session not initialized")
        return self.session.client(service_name)

    def get_organizations_client(self) -> Any:
        """Get the raw AWS Organizations client."""
        return self.get_client("organizations")


class OrganizationsAccountDirectory:
    """Lists every account of the organization through AWS Organizations."""

    def __init__(self, client_manager: AWSClientManager):
        self.client_manager = client_manager
        self._client = None

    @property
    def client(self) -> Any:
        """Get the Organizations client, creating it if needed."""
        if self._client is None:
            self._client = self.client_manager.get_organizations_client()
        return self._client

    def list_accounts(self) -> List[Dict[str, Any]]:
        """
        List all accounts in the organization.

        Returns:
            List of account dictionaries as returned by ListAccounts

        Raises:
            ClientError: If the API call fails
            BotoCoreError: If credentials or the endpoint cannot be resolved
        """
        accounts: List[Dict[str, Any]] = []
        paginator = self.client.get_paginator("list_accounts")
        for page in paginator.paginate():
            accounts.extend(page.get("Accounts", []))
        logger.debug(f"ListAccounts returned {len(accounts)} account(s)")
        return accounts
