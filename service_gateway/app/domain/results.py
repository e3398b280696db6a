"""
Outcome of a single backend exchange.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class BackendSuccess:
    """A complete HTTP exchange, whatever the status code."""

    status_code: int
    body: bytes
    content_type: Optional[str] = None


@dataclass(frozen=True)
class BackendFailure:
    """The exchange could not be completed at the transport level."""

    cause: BaseException


BackendCallResult = Union[BackendSuccess, BackendFailure]
