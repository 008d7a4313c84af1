import time
import logging
import functools
import inspect
from typing import Callable, Any

logger = logging.getLogger(__name__)


def _get_function_name(func: Callable, args: tuple = ()) -> str:
    """
    Return 'ClassName.method_name' for methods, or the qualified name otherwise.

    For methods declared on a port, the concrete adapter's class name is used.
    """
    if args:
        instance = args[0]
        if inspect.isclass(instance):
            return f"{instance.__name__}.{func.__name__}"
        if hasattr(instance, func.__name__):
            return f"{instance.__class__.__name__}.{func.__name__}"
    return func.__qualname__


def log_execution_time(log_level: str = "debug", unit: str = "ms") -> Callable:
    """
    Decorator to measure and log the execution time of a synchronous call.

    Args:
        log_level: Log level ("debug", "info", "warning", "error")
        unit: Time unit ("ms" for milliseconds, "s" for seconds)
    """
    scale = 1000 if unit == "ms" else 1

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time = time.perf_counter()
            func_name = _get_function_name(func, args)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = (time.perf_counter() - start_time) * scale
                logger.error(f"{func_name} failed after {elapsed:.2f}{unit}: {e}")
                raise
            elapsed = (time.perf_counter() - start_time) * scale
            getattr(logger, log_level)(f"{func_name} executed in {elapsed:.2f}{unit}")
            return result

        return wrapper

    return decorator
