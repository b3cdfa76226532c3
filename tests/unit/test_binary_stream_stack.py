"""
Unit tests for the Binary Stream Metadata CDK stack
"""

import pytest
import sys
import os

import aws_cdk as cdk
from aws_cdk.assertions import Match, Template

# Add project root
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../..'))

from lib.binary_stream_stack import BinaryStreamMetadataStack


@pytest.fixture(scope='module')
def template():
    app = cdk.App(context={"environment": "unit-test"})
    stack = BinaryStreamMetadataStack(
        app,
        "TestBinaryStreamMetadataStack",
        env=cdk.Environment(account="123456789012", region="us-east-1")
    )
    return Template.from_stack(stack)


class TestBinaryStreamMetadataStack:
    """Tests for BinaryStreamMetadataStack resources"""

    def test_media_bucket(self, template):
        template.has_resource_properties("AWS::S3::Bucket", {
            "BucketName": "rdp-media-assets"
        })

    def test_lambda_environment(self, template):
        template.has_resource_properties("AWS::Lambda::Function", {
            "Handler": "index.handler",
            "Runtime": "python3.11",
            "Environment": {
                "Variables": {
                    "ENV_RDP_HOST": "rdp.internal",
                    "ENV_RDP_PORT": "8080",
                    "ENV_CLIENT_ID": "rdpclient",
                    "ENV_DEFAULT_OWNERSHIPDATA": "rdp",
                    "ENV_DEFAULT_TENANT_ID": "rdp",
                    "ENV_DEFAULT_USER_ID": "system",
                    "ENV_DEFAULT_USER_ROLES": "admin",
                    "ENV_IS_DEBUG_ENABLED": "false",
                    "ENV_USE_CONTAINER_METADATA": "false",
                }
            }
        })

    def test_shared_layer(self, template):
        template.resource_count_is("AWS::Lambda::LayerVersion", 1)
        template.has_resource_properties("AWS::Lambda::Function", {
            "Handler": "index.handler",
            "Layers": Match.any_value()
        })

    def test_object_created_notification(self, template):
        template.has_resource_properties("Custom::S3BucketNotifications", {
            "NotificationConfiguration": {
                "LambdaFunctionConfigurations": [
                    Match.object_like({"Events": ["s3:ObjectCreated:*"]})
                ]
            }
        })

    def test_bucket_tagging_permission(self, template):
        template.has_resource_properties("AWS::IAM::Policy", {
            "PolicyDocument": {
                "Statement": Match.array_with([
                    Match.object_like({
                        "Action": "s3:GetBucketTagging",
                        "Effect": "Allow"
                    })
                ])
            }
        })


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
