"""
Configuration module for environment variable validation and type-safe config.

Every example reads its settings through this module, so the same
environment drives the whole run (see the README for the variables).
"""
import os
from dataclasses import dataclass
from typing import Optional

from models import ParameterType

CREDENTIAL_SOURCES = {"static", "default"}
DEFAULT_PARAMETER_VALUE = "Cash Rules Everything Around Me"
# GetParametersByPath accepts 1..10
MAX_RESULTS_LIMIT = 10


@dataclass
class Config:
    """Type-safe configuration object with validated environment variables."""

    aws_region: str
    parameter_name: str
    credential_source: str = "default"
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    aws_session_token: Optional[str] = None
    parameter_value: str = DEFAULT_PARAMETER_VALUE
    parameter_type: ParameterType = ParameterType.SECURE_STRING
    parameter_path: str = "/"
    path_max_results: int = 2
    path_filter_type: Optional[ParameterType] = ParameterType.SECURE_STRING
    log_level: str = "INFO"

    @property
    def uses_static_credentials(self) -> bool:
        return self.credential_source == "static"

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config instance from environment variables.

        Raises:
            ValueError: If required environment variables are missing or invalid.
        """
        aws_region = os.environ.get("AWS_REGION")
        if not aws_region:
            raise ValueError("AWS_REGION environment variable is required")

        parameter_name = os.environ.get("AWS_PARAMETER_NAME")
        if not parameter_name:
            raise ValueError(
                "AWS_PARAMETER_NAME environment variable is required"
            )

        credential_source = os.environ.get(
            "AWS_CREDENTIAL_SOURCE", "default"
        ).lower()
        if credential_source not in CREDENTIAL_SOURCES:
            raise ValueError(
                f"AWS_CREDENTIAL_SOURCE must be one of {CREDENTIAL_SOURCES}, "
                f"got: {credential_source}"
            )

        aws_access_key_id = os.environ.get("AWS_ACCESS_KEY_ID") or None
        aws_secret_access_key = os.environ.get("AWS_SECRET_ACCESS_KEY") or None
        aws_session_token = os.environ.get("AWS_SESSION_TOKEN") or None
        if credential_source == "static" and not (
            aws_access_key_id and aws_secret_access_key
        ):
            raise ValueError(
                "AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY are required "
                "when AWS_CREDENTIAL_SOURCE is static"
            )

        parameter_value = os.environ.get(
            "AWS_PARAMETER_VALUE", DEFAULT_PARAMETER_VALUE
        )
        parameter_type = _parse_type(
            "AWS_PARAMETER_TYPE",
            os.environ.get("AWS_PARAMETER_TYPE", ParameterType.SECURE_STRING.value),
        )
        parameter_path = os.environ.get("AWS_PARAMETER_PATH", "/") or "/"

        raw_max_results = os.environ.get("AWS_PARAMETER_PATH_MAX_RESULTS", "2")
        try:
            path_max_results = int(raw_max_results)
        except ValueError:
            raise ValueError(
                "AWS_PARAMETER_PATH_MAX_RESULTS must be an integer, "
                f"got: {raw_max_results}"
            ) from None
        if not 1 <= path_max_results <= MAX_RESULTS_LIMIT:
            raise ValueError(
                f"AWS_PARAMETER_PATH_MAX_RESULTS must be between 1 and "
                f"{MAX_RESULTS_LIMIT}, got: {path_max_results}"
            )

        # An empty value turns the Type filter off
        raw_filter_type = os.environ.get(
            "AWS_PARAMETER_PATH_FILTER_TYPE", ParameterType.SECURE_STRING.value
        )
        path_filter_type = (
            _parse_type("AWS_PARAMETER_PATH_FILTER_TYPE", raw_filter_type)
            if raw_filter_type
            else None
        )

        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

        # Validate log level
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if log_level not in valid_log_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of {valid_log_levels}, got: {log_level}"
            )

        return cls(
            aws_region=aws_region,
            parameter_name=parameter_name,
            credential_source=credential_source,
            aws_access_key_id=aws_access_key_id,
            aws_secret_access_key=aws_secret_access_key,
            aws_session_token=aws_session_token,
            parameter_value=parameter_value,
            parameter_type=parameter_type,
            parameter_path=parameter_path,
            path_max_results=path_max_results,
            path_filter_type=path_filter_type,
            log_level=log_level,
        )


def _parse_type(variable: str, raw: str) -> ParameterType:
    try:
        return ParameterType.parse(raw)
    except ValueError as e:
        raise ValueError(f"{variable}: {e}") from None

