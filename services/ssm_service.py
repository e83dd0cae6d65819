"""
SSM service for Parameter Store operations.
"""
import boto3
from typing import Any, Dict, Iterable, List, Optional, TYPE_CHECKING
from botocore.exceptions import BotoCoreError, ClientError
from config import Config
from logger_config import get_logger
from models import ParameterFilter, ParameterType
from utils.exceptions import ParameterStoreError

if TYPE_CHECKING:
    from mypy_boto3_ssm import SSMClient
else:
    SSMClient = Any

logger = get_logger(__name__)


class SSMService:
    """Service for SSM Parameter Store operations."""

    def __init__(self, config: Config) -> None:
        """
        Initialize SSM service.

        Args:
            config: Validated configuration holding region and credentials
        """
        self.config = config
        self._client: Optional[SSMClient] = None

    @property
    def client(self) -> SSMClient:
        """Lazy initialization of SSM client."""
        if self._client is None:
            self._client = boto3.client('ssm', **self._client_kwargs())
        return self._client

    def _client_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {'region_name': self.config.aws_region}
        if self.config.uses_static_credentials:
            kwargs['aws_access_key_id'] = self.config.aws_access_key_id
            kwargs['aws_secret_access_key'] = self.config.aws_secret_access_key
            kwargs['aws_session_token'] = self.config.aws_session_token
            logger.debug('Using static credentials from environment')
        else:
            logger.debug('Using the default credential provider chain')
        return kwargs

    def _call(self, operation: str, parameter_name: str, **params: Any) -> Dict[str, Any]:
        try:
            return getattr(self.client, operation)(**params)
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code')
            logger.error(f'SSM {operation} failed for {parameter_name}: {str(e)}')
            raise ParameterStoreError(
                str(e),
                operation=operation,
                parameter_name=parameter_name,
                error_code=error_code
            ) from e
        except BotoCoreError as e:
            logger.error(f'SSM {operation} failed for {parameter_name}: {str(e)}')
            raise ParameterStoreError(
                str(e), operation=operation, parameter_name=parameter_name
            ) from e

    def get_parameter(self, name: str, with_decryption: bool = True) -> Dict[str, Any]:
        """
        Read a single parameter.

        Args:
            name: Parameter name
            with_decryption: Return SecureString values decrypted

        Returns:
            GetParameter response dictionary

        Raises:
            ParameterStoreError: If the SSM call fails (including ParameterNotFound)
        """
        response = self._call(
            'get_parameter', name, Name=name, WithDecryption=with_decryption
        )
        logger.info(f'Successfully read parameter {name}')
        return response

    def get_parameters(
        self,
        names: Iterable[str],
        with_decryption: bool = True
    ) -> Dict[str, Any]:
        """
        Read a list of parameters in one call.

        Names that do not exist are reported under InvalidParameters
        instead of failing the call.

        Args:
            names: Parameter names
            with_decryption: Return SecureString values decrypted

        Returns:
            GetParameters response dictionary

        Raises:
            ParameterStoreError: If the SSM call fails
        """
        names = list(names)
        response = self._call(
            'get_parameters',
            ', '.join(names),
            Names=names,
            WithDecryption=with_decryption
        )
        invalid = response.get('InvalidParameters', [])
        if invalid:
            logger.warning(f'Parameters not found: {", ".join(invalid)}')
        logger.info(
            f'Successfully read {len(response.get("Parameters", []))} of '
            f'{len(names)} parameters'
        )
        return response

    def get_parameters_by_path(
        self,
        path: str,
        recursive: bool = True,
        filters: Optional[List[ParameterFilter]] = None,
        max_results: Optional[int] = None,
        with_decryption: bool = True
    ) -> Dict[str, Any]:
        """
        Read the first page of parameters under a path hierarchy.

        Args:
            path: Path prefix (e.g. "/" or "/app/prod")
            recursive: Descend into nested paths
            filters: Optional ParameterFilters entries
            max_results: Page size; the service default applies when None
            with_decryption: Return SecureString values decrypted

        Returns:
            GetParametersByPath response dictionary. NextToken is left
            in place but never followed.

        Raises:
            ParameterStoreError: If the SSM call fails
        """
        params: Dict[str, Any] = {
            'Path': path,
            'Recursive': recursive,
            'WithDecryption': with_decryption,
        }
        if filters:
            params['ParameterFilters'] = [f.to_request() for f in filters]
        if max_results is not None:
            params['MaxResults'] = max_results

        response = self._call('get_parameters_by_path', path, **params)
        logger.info(
            f'Successfully read {len(response.get("Parameters", []))} '
            f'parameters under {path}'
        )
        return response

    def put_parameter(
        self,
        name: str,
        value: str,
        parameter_type: ParameterType = ParameterType.STRING,
        overwrite: bool = True
    ) -> Dict[str, Any]:
        """
        Create or update a parameter.

        Args:
            name: Parameter name
            value: Parameter value
            parameter_type: Type tag for the stored value
            overwrite: Replace the value if the parameter already exists

        Returns:
            PutParameter response dictionary (holds the new Version)

        Raises:
            ParameterStoreError: If the SSM call fails (e.g. ParameterAlreadyExists)
        """
        response = self._call(
            'put_parameter',
            name,
            Name=name,
            Value=value,
            Type=ParameterType(parameter_type).value,
            Overwrite=overwrite
        )
        logger.info(
            f'Successfully put parameter {name} (version {response.get("Version")})'
        )
        return response

    def delete_parameter(self, name: str) -> Dict[str, Any]:
        """
        Delete a single parameter.

        Args:
            name: Parameter name

        Returns:
            DeleteParameter response dictionary

        Raises:
            ParameterStoreError: If the SSM call fails (including ParameterNotFound)
        """
        response = self._call('delete_parameter', name, Name=name)
        logger.info(f'Successfully deleted parameter {name}')
        return response
