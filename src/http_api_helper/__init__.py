"""HTTP API helper package.

Convenience wrapper around ``httpx`` that builds requests, attaches
headers, enforces timeouts, optionally checks network reachability,
logs request/response detail and returns a two-branch
:data:`~http_api_helper.result.Outcome` instead of raising.

:var __version__: Current package version
:type __version__: str
"""

from .api_helper import APIHelper, HTTPMethod
from .exceptions import (
    APIExceptionBase,
    NoInternetException,
    TimeoutException,
    UnexpectedStatusCodeException,
    UnhandledException,
)
from .models import RequestConfig
from .result import Failure, Outcome, Success

__version__ = "0.1.0"

__all__ = [
    "APIHelper",
    "HTTPMethod",
    "RequestConfig",
    "Outcome",
    "Success",
    "Failure",
    "APIExceptionBase",
    "NoInternetException",
    "TimeoutException",
    "UnexpectedStatusCodeException",
    "UnhandledException",
]
