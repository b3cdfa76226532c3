"""
Constants shared by the RDP binary stream Lambda functions
"""

# Metadata key prefixes
# Some stores reject '-' in metadata names, so producers may write x_rdp_ instead
RDP_ESCAPING_PREFIX = 'x_rdp_'
RDP_PREFIX = 'x-rdp-'

# Metadata keys (looked up case-insensitively)
TENANT_ID_METADATA_PROPERTY = 'x-rdp-tenantid'
CLIENT_ID_METADATA_PROPERTY = 'x-rdp-clientid'
USER_ID_METADATA_PROPERTY = 'x-rdp-userid'
USER_ROLES_METADATA_PROPERTY = 'x-rdp-userroles'
OWNERSHIP_DATA_METADATA_PROPERTY = 'x-rdp-ownershipdata'
TASK_ID_METADATA_PROPERTY = 'x-rdp-taskid'
OBJECT_ID_METADATA_PROPERTY = 'binarystreamobjectid'
ORIGINAL_FILE_NAME_METADATA_PROPERTY = 'originalfilename'

# Request headers
RDP_API_VERSION = '8.1'
CONTENT_TYPE_JSON = 'application/json'
HEADER_CONTENT_TYPE = 'Content-Type'
HEADER_VERSION = 'x-rdp-version'
HEADER_CLIENT_ID = 'x-rdp-clientId'
HEADER_OWNERSHIP_DATA = 'x-rdp-ownershipData'
HEADER_TENANT_ID = 'x-rdp-tenantId'
HEADER_USER_ID = 'x-rdp-userId'
HEADER_USER_ROLES = 'x-rdp-userRoles'

# RDP API
CREATE_BINARY_STREAM_OBJECT_URL_TEMPLATE = "http://{host}:{port}/{tenant_id}/api/binarystreamobjectservice/create"
RESPONSE_STATUS_SUCCESS = 'success'

# Descriptor constants
BINARY_STREAM_OBJECT_TYPE = 'binarystreamobject'
DEFAULT_LOCALE = 'en-US'
DEFAULT_SOURCE = 'internal'

# Environment variables
ENV_RDP_HOST = 'ENV_RDP_HOST'
ENV_RDP_PORT = 'ENV_RDP_PORT'
ENV_CLIENT_ID = 'ENV_CLIENT_ID'
ENV_DEFAULT_OWNERSHIPDATA = 'ENV_DEFAULT_OWNERSHIPDATA'
ENV_DEFAULT_TENANT_ID = 'ENV_DEFAULT_TENANT_ID'
ENV_DEFAULT_USER_ID = 'ENV_DEFAULT_USER_ID'
ENV_DEFAULT_USER_ROLES = 'ENV_DEFAULT_USER_ROLES'
ENV_IS_DEBUG_ENABLED = 'ENV_IS_DEBUG_ENABLED'
ENV_USE_CONTAINER_METADATA = 'ENV_USE_CONTAINER_METADATA'

# Checked in this order; the first missing one is reported
REQUIRED_ENV_VARIABLES = [
    ENV_RDP_HOST,
    ENV_RDP_PORT,
    ENV_CLIENT_ID,
    ENV_DEFAULT_OWNERSHIPDATA,
    ENV_DEFAULT_TENANT_ID,
    ENV_DEFAULT_USER_ID,
    ENV_DEFAULT_USER_ROLES,
]
