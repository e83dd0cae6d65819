"""
Parameter Store example programs.

Each example reads its settings from the environment, builds an SSM client,
issues a single request and prints the prettified response. Any failure is
printed and ends the process with exit status 1 (see utils.decorators).
"""
from typing import Any, Callable, Dict

from config import Config
from logger_config import get_logger, set_log_level
from models import Parameter, ParameterFilter
from prettify import prettify
from services.ssm_service import SSMService
from utils.decorators import example

logger = get_logger(__name__)

# Name used to show that GetParameters skips unknown names instead of failing
INVALID_PARAMETER_NAME = "InvalidParamName"


def _setup():
    config = Config.from_env()
    set_log_level(config.log_level)
    return config, SSMService(config)


def _with_parameters(response: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of response with Parameter entries turned into Parameter records."""
    shown = dict(response)
    if "Parameter" in shown:
        shown["Parameter"] = Parameter.from_response(shown["Parameter"])
    if "Parameters" in shown:
        shown["Parameters"] = [Parameter.from_response(p) for p in shown["Parameters"]]
    return shown


def _show(operation: str, subject: str, response: Dict[str, Any]) -> None:
    print(f"{operation}: {subject}")
    print(prettify(response))


@example
def put_parameter_example() -> Dict[str, Any]:
    """Insert or update the configured parameter, overwriting any existing value."""
    config, ssm = _setup()
    response = ssm.put_parameter(
        config.parameter_name,
        config.parameter_value,
        parameter_type=config.parameter_type,
        overwrite=True,
    )
    _show("PutParameter", config.parameter_name, response)
    return response


@example
def get_parameter_example() -> Dict[str, Any]:
    """Read the configured parameter, decrypting SecureString values."""
    config, ssm = _setup()
    response = ssm.get_parameter(config.parameter_name, with_decryption=True)
    _show("GetParameter", config.parameter_name, _with_parameters(response))
    return response


@example
def get_parameters_example() -> Dict[str, Any]:
    """Read a list holding one valid and one invalid parameter name."""
    config, ssm = _setup()
    response = ssm.get_parameters(
        [config.parameter_name, INVALID_PARAMETER_NAME], with_decryption=True
    )
    _show("GetParameters", config.parameter_name, _with_parameters(response))
    return response


@example
def get_parameters_by_path_example() -> Dict[str, Any]:
    """Read the first page of parameters under the configured path."""
    config, ssm = _setup()

    filters = []
    if config.path_filter_type is not None:
        filters.append(
            ParameterFilter(key="Type", values=[config.path_filter_type.value])
        )

    response = ssm.get_parameters_by_path(
        config.parameter_path,
        recursive=True,
        filters=filters,
        max_results=config.path_max_results,
        with_decryption=True,
    )
    if response.get("NextToken"):
        logger.info("More parameters are available; only the first page is shown")
    _show("GetParametersByPath", config.parameter_path, _with_parameters(response))
    return response


@example
def delete_parameter_example() -> Dict[str, Any]:
    """Delete the configured parameter."""
    config, ssm = _setup()
    response = ssm.delete_parameter(config.parameter_name)
    _show("DeleteParameter", config.parameter_name, response)
    return response


# Run order when no examples are selected
EXAMPLES: Dict[str, Callable[[], Dict[str, Any]]] = {
    "put": put_parameter_example,
    "get": get_parameter_example,
    "get-parameters": get_parameters_example,
    "get-parameters-by-path": get_parameters_by_path_example,
    "delete": delete_parameter_example,
}
