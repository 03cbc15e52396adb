"""fallible - Success/Failure results for operations that can fail."""

from fallible.adapters import run, run_async
from fallible.config import ResultConfig, get_config
from fallible.errors import FallibleError, UnwrapError
from fallible.result import Err, Failure, Ok, Result, ResultBase, Success

__all__ = [
    "Result",
    "ResultBase",
    "Success",
    "Failure",
    "Ok",
    "Err",
    "run",
    "run_async",
    "FallibleError",
    "UnwrapError",
    "ResultConfig",
    "get_config",
]
