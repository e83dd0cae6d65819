"""
Shared fixtures for tests that talk to a moto-mocked Parameter Store.
"""
import os
import pytest
import boto3
from unittest.mock import patch
from moto import mock_aws

PARAMETER_NAME = '/examples/db/password'
REGION = 'us-east-1'


@pytest.fixture
def example_env():
    """Minimal environment for the examples, with nothing else leaking in."""
    env = {
        'AWS_REGION': REGION,
        'AWS_PARAMETER_NAME': PARAMETER_NAME,
    }
    with patch.dict(os.environ, env, clear=True):
        yield env


@pytest.fixture
def ssm_backend(example_env):
    """
    Mocked SSM backend. Yields a boto3 client for arranging and inspecting
    parameters outside the code under test.
    """
    # mock_aws installs fake credentials, so it must start after the env patch
    with mock_aws():
        yield boto3.client('ssm', region_name=REGION)
