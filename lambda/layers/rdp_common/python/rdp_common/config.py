"""
Environment configuration for the RDP binary stream Lambda functions
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from rdp_common import constants
from rdp_common.errors import MissingConfiguration


def _is_enabled(value: Optional[str]) -> bool:
    return bool(value) and value.strip().lower() == 'true'


@dataclass(frozen=True)
class RdpConfig:
    rdp_host: str
    rdp_port: str
    default_client_id: str
    default_ownership_data: str
    default_tenant_id: str
    default_user_id: str
    default_user_roles: str
    is_debug_enabled: bool = False
    use_container_metadata: bool = False

    @staticmethod
    def load(environ: Optional[Mapping[str, str]] = None) -> "RdpConfig":
        """
        Read the configuration once from the process environment

        Raises:
            MissingConfiguration: for the first required variable that is missing or empty
        """
        if environ is None:
            environ = os.environ

        for key in constants.REQUIRED_ENV_VARIABLES:
            if not environ.get(key):
                raise MissingConfiguration(key)

        return RdpConfig(
            rdp_host=environ[constants.ENV_RDP_HOST],
            rdp_port=environ[constants.ENV_RDP_PORT],
            default_client_id=environ[constants.ENV_CLIENT_ID],
            default_ownership_data=environ[constants.ENV_DEFAULT_OWNERSHIPDATA],
            default_tenant_id=environ[constants.ENV_DEFAULT_TENANT_ID],
            default_user_id=environ[constants.ENV_DEFAULT_USER_ID],
            default_user_roles=environ[constants.ENV_DEFAULT_USER_ROLES],
            is_debug_enabled=_is_enabled(environ.get(constants.ENV_IS_DEBUG_ENABLED)),
            use_container_metadata=_is_enabled(environ.get(constants.ENV_USE_CONTAINER_METADATA)),
        )

    def to_log_dict(self) -> Dict[str, Any]:
        return {
            'rdpHost': self.rdp_host,
            'rdpPort': self.rdp_port,
            'defaultClientId': self.default_client_id,
            'defaultOwnershipData': self.default_ownership_data,
            'defaultTenantId': self.default_tenant_id,
            'defaultUserId': self.default_user_id,
            'defaultUserRoles': self.default_user_roles,
            'isDebugEnabled': self.is_debug_enabled,
            'useContainerMetadata': self.use_container_metadata,
        }
