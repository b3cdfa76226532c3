"""
Deployment constants for the RDP Binary Stream Metadata project
"""

# Lambda asset locations (relative to the repository root)
CREATE_METADATA_LAMBDA_ASSET = "lambda/binary_stream/create_metadata"
RDP_COMMON_LAYER_ASSET = "lambda/layers/rdp_common"

# Lambda sizing
CREATE_METADATA_TIMEOUT_SECONDS = 60
CREATE_METADATA_MEMORY_MB = 256

# Used when config/{environment}.json is not present
DEFAULT_STACK_CONFIG = {
    "buckets": {
        "media_bucket": "rdp-media-assets",
    },
    "rdp": {
        "host": "rdp.internal",
        "port": "8080",
        "client_id": "rdpclient",
        "default_ownership_data": "rdp",
        "default_tenant_id": "rdp",
        "default_user_id": "system",
        "default_user_roles": "admin",
        "is_debug_enabled": False,
        "use_container_metadata": False,
    },
}
