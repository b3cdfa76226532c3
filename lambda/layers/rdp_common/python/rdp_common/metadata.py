"""
Metadata resolution and binary stream descriptor assembly

Pure functions, no I/O:
- Rewrites escaped x_rdp_ metadata keys to the x-rdp- header convention
- Resolves tenant/client/user/roles/ownership from object metadata,
  container metadata, then configured defaults
- Builds the binaryStreamObject payload for the RDP create API
"""

from typing import Any, Dict, Mapping, Optional

from rdp_common import constants
from rdp_common.config import RdpConfig
from rdp_common.models import BlobTrigger


def normalize_metadata(metadata: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """
    Rewrite escaped-prefix keys to the canonical prefix.

    Only the prefix is replaced; the rest of the key keeps its casing and the
    value is untouched. Keys without the escaped prefix pass through as-is.

    Args:
        metadata: Raw metadata attached to the object (may be None)

    Returns:
        New dict with normalized keys
    """
    normalized = {}
    if not metadata:
        return normalized

    prefix_length = len(constants.RDP_ESCAPING_PREFIX)
    for key, value in metadata.items():
        if key[:prefix_length].lower() == constants.RDP_ESCAPING_PREFIX:
            key = constants.RDP_PREFIX + key[prefix_length:]
        normalized[key] = value

    return normalized


def find_metadata_value(metadata: Optional[Mapping[str, str]], name: str) -> Optional[str]:
    """
    Look up a metadata value, ignoring key case.

    An exact key match wins over a case-insensitive one. Empty values are
    treated as absent.
    """
    if not metadata:
        return None

    value = metadata.get(name)
    if value:
        return value

    wanted = name.lower()
    for key, value in metadata.items():
        if key.lower() == wanted and value:
            return value

    return None


def resolve_attribute(
    name: str,
    object_metadata: Optional[Mapping[str, str]],
    container_metadata: Optional[Mapping[str, str]],
    default: str
) -> str:
    """
    Resolve one attribute: object metadata, then container metadata, then default
    """
    value = find_metadata_value(object_metadata, name)
    if value:
        return value

    value = find_metadata_value(container_metadata, name)
    if value:
        return value

    return default


def create_request_headers(
    config: RdpConfig,
    object_metadata: Optional[Mapping[str, str]],
    container_metadata: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """
    Build the request headers for the RDP API.

    Returns:
        Dict with content type, protocol version and the five resolved
        identity attributes
    """
    def resolve(name: str, default: str) -> str:
        return resolve_attribute(name, object_metadata, container_metadata, default)

    return {
        constants.HEADER_CONTENT_TYPE: constants.CONTENT_TYPE_JSON,
        constants.HEADER_VERSION: constants.RDP_API_VERSION,
        constants.HEADER_CLIENT_ID: resolve(
            constants.CLIENT_ID_METADATA_PROPERTY, config.default_client_id
        ),
        constants.HEADER_OWNERSHIP_DATA: resolve(
            constants.OWNERSHIP_DATA_METADATA_PROPERTY, config.default_ownership_data
        ),
        constants.HEADER_TENANT_ID: resolve(
            constants.TENANT_ID_METADATA_PROPERTY, config.default_tenant_id
        ),
        constants.HEADER_USER_ID: resolve(
            constants.USER_ID_METADATA_PROPERTY, config.default_user_id
        ),
        constants.HEADER_USER_ROLES: resolve(
            constants.USER_ROLES_METADATA_PROPERTY, config.default_user_roles
        ),
    }


def get_original_file_name(key: str) -> str:
    """Last '/'-delimited segment of the object key"""
    return key.split('/')[-1]


def build_binary_stream_object(
    trigger: BlobTrigger,
    headers: Mapping[str, str],
    metadata: Optional[Mapping[str, str]]
) -> Dict[str, Any]:
    """
    Assemble the payload for the binarystreamobjectservice create call

    Args:
        trigger: Uploaded object details
        headers: Resolved request headers (see create_request_headers)
        metadata: Normalized object metadata

    Returns:
        Dict with clientAttributes and binaryStreamObject sections
    """
    object_id = (
        find_metadata_value(metadata, constants.OBJECT_ID_METADATA_PROPERTY)
        or trigger.invocation_id
    )
    original_file_name = (
        find_metadata_value(metadata, constants.ORIGINAL_FILE_NAME_METADATA_PROPERTY)
        or get_original_file_name(trigger.key)
    )
    task_id = (
        find_metadata_value(metadata, constants.TASK_ID_METADATA_PROPERTY)
        or trigger.invocation_id
    )

    return {
        'clientAttributes': {
            'taskId': {
                'values': [
                    {
                        'locale': constants.DEFAULT_LOCALE,
                        'source': constants.DEFAULT_SOURCE,
                        'value': task_id
                    }
                ]
            }
        },
        'binaryStreamObject': {
            'id': object_id,
            'type': constants.BINARY_STREAM_OBJECT_TYPE,
            'properties': {
                'objectKey': trigger.key,
                'originalFileName': original_file_name,
                'fullObjectPath': trigger.key,
                'contentSize': trigger.size,
                'user': headers[constants.HEADER_USER_ID],
                'role': headers[constants.HEADER_USER_ROLES],
                'ownershipData': headers[constants.HEADER_OWNERSHIP_DATA]
            }
        }
    }


def get_task_id(binary_stream_object: Mapping[str, Any]) -> str:
    return binary_stream_object['clientAttributes']['taskId']['values'][0]['value']
