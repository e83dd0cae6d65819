"""
Custom exception classes for the Parameter Store service layer.
"""
from typing import Optional


class ParameterStoreError(Exception):
    """Exception raised when a Parameter Store call fails."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        parameter_name: Optional[str] = None,
        error_code: Optional[str] = None
    ):
        """
        Initialize Parameter Store error.

        Args:
            message: Error message, usually the underlying botocore error text
            operation: SSM operation name if available
            parameter_name: Parameter name or path if available
            error_code: AWS error code (e.g. ParameterNotFound) if available
        """
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.parameter_name = parameter_name
        self.error_code = error_code
