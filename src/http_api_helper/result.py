"""Two-variant result returned by every API helper operation.

An :data:`Outcome` is either a :class:`Success` holding the decoded JSON
object or a :class:`Failure` holding one of the exception kinds from
:mod:`http_api_helper.exceptions`. Never both, never neither.

Callers branch with ``fold``, ``isinstance`` or structural matching::

    match await helper.get_api():
        case Success(value=payload):
            ...
        case Failure(error=UnexpectedStatusCodeException() as err):
            ...
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, TypeVar, Union

from .exceptions import APIExceptionBase

T = TypeVar("T")


@dataclass(frozen=True)
class Success:
    """Successful outcome carrying the decoded response object."""

    value: Dict[str, Any]

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def fold(
        self,
        on_failure: Callable[[APIExceptionBase], T],
        on_success: Callable[[Dict[str, Any]], T],
    ) -> T:
        """Apply ``on_success`` to the payload."""
        return on_success(self.value)


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying the typed error."""

    error: APIExceptionBase

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def fold(
        self,
        on_failure: Callable[[APIExceptionBase], T],
        on_success: Callable[[Dict[str, Any]], T],
    ) -> T:
        """Apply ``on_failure`` to the error."""
        return on_failure(self.error)


Outcome = Union[Success, Failure]
