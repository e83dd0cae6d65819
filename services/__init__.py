"""
Service layer for AWS operations.

This module provides abstraction over the SSM Parameter Store API,
separating the example programs from boto3 details.
"""
