"""
Example decorators for error handling and logging.
"""
import functools
import sys
from typing import Any, Callable

from logger_config import get_logger

logger = get_logger(__name__)


def example(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator for example functions.

    Provides:
    - Invocation and completion logging
    - The print-or-exit failure policy: the error text is printed to
      stdout and the process exits with status 1

    Args:
        func: The example function to decorate

    Returns:
        Decorated example function
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger.info(f"Example {func.__name__} invoked")

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            print(str(e))
            logger.error(
                f"Example {func.__name__} failed: {type(e).__name__}: {str(e)}",
                exc_info=True
            )
            sys.exit(1)

        logger.info(f"Example {func.__name__} completed successfully")
        return result

    return wrapper
