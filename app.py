#!/usr/bin/env python3
"""
RDP Binary Stream Metadata CDK Application

This app defines the infrastructure that registers files uploaded to a
tenant's media bucket as binary stream objects on the RDP API.
"""

import aws_cdk as cdk
from lib.binary_stream_stack import BinaryStreamMetadataStack

app = cdk.App()

# Get environment configuration
env = cdk.Environment(
    account=app.node.try_get_context("account"),
    region=app.node.try_get_context("region") or "us-east-1"
)

BinaryStreamMetadataStack(
    app,
    "RdpBinaryStreamMetadataStack",
    env=env,
    description="RDP Binary Stream Metadata - registers uploaded media with the RDP API"
)

app.synth()
