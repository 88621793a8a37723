"""AWS service client management.

This package provides the AWS side of the account lookup:
- Session lifecycle for a profile/region pair
- The AWS Organizations account directory used to refresh the local cache
"""

from .manager import AWSClientManager, OrganizationsAccountDirectory

__all__ = [
    "AWSClientManager",
    "OrganizationsAccountDirectory",
]
