"""
Lambda: Create Binary Stream Metadata

Triggered by S3 upload to a tenant's media bucket.
- Loads RDP settings from the environment
- Reads the object's user metadata (x_rdp_ keys are rewritten to x-rdp-)
- Resolves tenant/client/user/roles/ownership (object -> container -> default)
- Builds the binary stream object and POSTs it to the RDP API
- Fails the invocation when the RDP API does not confirm success (no retry here)
"""

import json
import os
import sys
from typing import Any, Dict, Mapping, Optional
from urllib.parse import unquote_plus

import boto3
import requests
from botocore.exceptions import ClientError

# Add shared code to path
sys.path.insert(0, '/opt/python')  # Lambda layer path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../../layers/rdp_common/python'))

from rdp_common import constants
from rdp_common.config import RdpConfig
from rdp_common.errors import (
    BinaryStreamError,
    InvalidTriggerEvent,
    TransportError,
    UnsuccessfulResponse,
)
from rdp_common.metadata import (
    build_binary_stream_object,
    create_request_headers,
    get_task_id,
    normalize_metadata,
)
from rdp_common.models import BlobTrigger, DeliveryResult

# Initialize clients
s3_client = boto3.client('s3')
http_session = requests.Session()


def handler(event, context):
    """
    Main handler for Create Binary Stream Metadata Lambda

    Args:
        event: S3 ObjectCreated notification
        context: Lambda context (aws_request_id is the invocation id)

    Returns:
        Dict with status and the identifiers sent to RDP

    Raises:
        BinaryStreamError: the invocation failed; the message describes why
    """
    try:
        config = RdpConfig.load()
        if config.is_debug_enabled:
            print(f"Environment configuration: {json.dumps(config.to_log_dict(), indent=2)}")

        trigger = parse_trigger(event, context)
        if config.is_debug_enabled:
            print(f"Processing blob path: {trigger.bucket}/{trigger.key}, Blob Size: {trigger.size} Bytes")
            print(f"Blob details: {json.dumps(trigger.binding_data, indent=2, default=str)}")

        metadata = normalize_metadata(trigger.metadata)
        container_metadata = None
        if config.use_container_metadata:
            container_metadata = normalize_metadata(get_container_metadata(trigger.bucket))

        if config.is_debug_enabled:
            print(f"Blob metadata: {json.dumps(metadata, indent=2)}")
            print(f"Container metadata: {json.dumps(container_metadata, indent=2)}")

        headers = create_request_headers(config, metadata, container_metadata)
        binary_stream_object = build_binary_stream_object(trigger, headers, metadata)

        post_binary_stream_object(http_session, config, headers, binary_stream_object)

        return {
            'statusCode': 200,
            'status': 'SUCCESS',
            'objectId': binary_stream_object['binaryStreamObject']['id'],
            'taskId': get_task_id(binary_stream_object),
            'objectKey': trigger.key
        }

    except BinaryStreamError as e:
        print(f"Error creating binary stream object: {str(e)}")
        raise


def parse_trigger(event: Dict[str, Any], context: Any) -> BlobTrigger:
    """
    Extract the uploaded object from an S3 notification

    Key is URL-decoded (S3 events URL-encode special characters) and the
    user metadata is read with HeadObject.
    """
    records = event.get('Records') or []
    if not records or 's3' not in records[0]:
        raise InvalidTriggerEvent("Event does not contain an S3 record")

    if len(records) > 1:
        print(f"Received {len(records)} records, only the first is processed")

    record = records[0]
    bucket = record['s3']['bucket']['name']
    key = unquote_plus(record['s3']['object']['key'])

    response = s3_client.head_object(Bucket=bucket, Key=key)

    size = record['s3']['object'].get('size')
    if size is None:
        size = response['ContentLength']

    return BlobTrigger(
        bucket=bucket,
        key=key,
        size=int(size),
        invocation_id=context.aws_request_id,
        metadata=response.get('Metadata', {}),
        binding_data=record
    )


def get_container_metadata(bucket: str) -> Dict[str, str]:
    """
    Bucket tag set as container-level metadata

    Returns:
        Dict of tag key -> value, empty if the bucket has no tags
    """
    try:
        response = s3_client.get_bucket_tagging(Bucket=bucket)
    except ClientError as e:
        if e.response.get('Error', {}).get('Code') == 'NoSuchTagSet':
            return {}
        raise

    return {tag['Key']: tag['Value'] for tag in response.get('TagSet', [])}


def get_request_url(config: RdpConfig, headers: Mapping[str, str]) -> str:
    return constants.CREATE_BINARY_STREAM_OBJECT_URL_TEMPLATE.format(
        host=config.rdp_host,
        port=config.rdp_port,
        tenant_id=headers[constants.HEADER_TENANT_ID]
    )


def post_binary_stream_object(
    session: requests.Session,
    config: RdpConfig,
    headers: Mapping[str, str],
    binary_stream_object: Dict[str, Any]
) -> DeliveryResult:
    """
    POST the binary stream object to the RDP API, exactly once

    Raises:
        TransportError: the request could not be sent or the connection broke
        UnsuccessfulResponse: non-200, empty or non-JSON body, or status other than success
    """
    url = get_request_url(config, headers)
    if config.is_debug_enabled:
        print(f"BinaryStreamObject: {json.dumps(binary_stream_object, indent=2)}")
        print(f"Http request options: {json.dumps({'url': url, 'method': 'POST', 'headers': dict(headers)}, indent=2)}")

    try:
        response = session.post(url, data=json.dumps(binary_stream_object), headers=dict(headers))
    except requests.exceptions.RequestException as e:
        error = TransportError(str(e))
        print(str(error))
        raise error from e

    if config.is_debug_enabled:
        print(f"Status: {response.status_code}")
        print(f"Headers: {json.dumps(dict(response.headers))}")

    response_status = None
    if response.status_code == 200 and response.text:
        print(f"Using taskId {get_task_id(binary_stream_object)}, RDP API Response: {response.text}")
        response_status = get_response_status(response.text)

    if response_status is None or response_status.lower() != constants.RESPONSE_STATUS_SUCCESS:
        error = UnsuccessfulResponse(response.status_code, response.text)
        print(str(error))
        raise error

    return DeliveryResult(
        status_code=response.status_code,
        body=response.text,
        response_status=response_status
    )


def get_response_status(body: str) -> Optional[str]:
    """The nested response.status of an RDP API reply, or None"""
    try:
        response_json = json.loads(body)
    except ValueError:
        return None

    if not isinstance(response_json, dict):
        return None
    response = response_json.get('response')
    if not isinstance(response, dict):
        return None
    status = response.get('status')
    return status if isinstance(status, str) else None
