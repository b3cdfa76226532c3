"""
Binary Stream Metadata Stack - registers uploaded media with the RDP API

This stack creates:
- S3 bucket for tenant media assets
- Lambda layer with the shared rdp_common package
- Create Binary Stream Metadata Lambda
- S3 event trigger (ObjectCreated)
"""

import copy
import json
import os

from aws_cdk import (
    Stack,
    Duration,
    RemovalPolicy,
    aws_s3 as s3,
    aws_lambda as lambda_,
    aws_iam as iam,
    aws_s3_notifications as s3n,
    aws_logs as logs,
)
from constructs import Construct

from config.constants import (
    CREATE_METADATA_LAMBDA_ASSET,
    CREATE_METADATA_MEMORY_MB,
    CREATE_METADATA_TIMEOUT_SECONDS,
    DEFAULT_STACK_CONFIG,
    RDP_COMMON_LAYER_ASSET,
)

PROJECT_ROOT = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..")


class BinaryStreamMetadataStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Load configuration
        config = self._load_config()

        # Create S3 bucket for media assets
        self.media_bucket = s3.Bucket(
            self,
            "MediaBucket",
            bucket_name=config["buckets"]["media_bucket"],
            removal_policy=RemovalPolicy.RETAIN,
            versioned=False,
        )

        # Shared metadata/config code
        self.rdp_common_layer = lambda_.LayerVersion(
            self,
            "RdpCommonLayer",
            code=lambda_.Code.from_asset(os.path.join(PROJECT_ROOT, RDP_COMMON_LAYER_ASSET)),
            compatible_runtimes=[lambda_.Runtime.PYTHON_3_11],
            description="Metadata resolution and descriptor assembly for RDP",
        )

        self.create_metadata_lambda = self._create_metadata_lambda(config)

        # Add S3 event notification to trigger the Lambda
        self._setup_s3_trigger()

    def _load_config(self) -> dict:
        """Load configuration from context or use defaults"""
        env = self.node.try_get_context("environment") or "dev"
        config_path = os.path.join(PROJECT_ROOT, "config", f"{env}.json")

        try:
            with open(config_path, "r") as f:
                return json.load(f)
        except FileNotFoundError:
            return copy.deepcopy(DEFAULT_STACK_CONFIG)

    def _create_metadata_lambda(self, config: dict) -> lambda_.Function:
        """Create the Create Binary Stream Metadata Lambda"""
        rdp = config["rdp"]

        function = lambda_.Function(
            self,
            "CreateBinaryStreamMetadataFunction",
            runtime=lambda_.Runtime.PYTHON_3_11,
            handler="index.handler",
            code=lambda_.Code.from_asset(os.path.join(PROJECT_ROOT, CREATE_METADATA_LAMBDA_ASSET)),
            layers=[self.rdp_common_layer],
            timeout=Duration.seconds(CREATE_METADATA_TIMEOUT_SECONDS),
            memory_size=CREATE_METADATA_MEMORY_MB,
            log_retention=logs.RetentionDays.THREE_DAYS,  # Auto-delete logs after 3 days
            environment={
                "ENV_RDP_HOST": rdp["host"],
                "ENV_RDP_PORT": str(rdp["port"]),
                "ENV_CLIENT_ID": rdp["client_id"],
                "ENV_DEFAULT_OWNERSHIPDATA": rdp["default_ownership_data"],
                "ENV_DEFAULT_TENANT_ID": rdp["default_tenant_id"],
                "ENV_DEFAULT_USER_ID": rdp["default_user_id"],
                "ENV_DEFAULT_USER_ROLES": rdp["default_user_roles"],
                "ENV_IS_DEBUG_ENABLED": str(rdp.get("is_debug_enabled", False)).lower(),
                "ENV_USE_CONTAINER_METADATA": str(rdp.get("use_container_metadata", False)).lower(),
            },
        )

        # HeadObject for user metadata, GetBucketTagging for container metadata
        self.media_bucket.grant_read(function)
        function.add_to_role_policy(
            iam.PolicyStatement(
                actions=["s3:GetBucketTagging"],
                resources=[self.media_bucket.bucket_arn],
            )
        )

        return function

    def _setup_s3_trigger(self):
        """Setup S3 event notification to invoke the Lambda"""
        self.media_bucket.add_event_notification(
            s3.EventType.OBJECT_CREATED,
            s3n.LambdaDestination(self.create_metadata_lambda),
        )
