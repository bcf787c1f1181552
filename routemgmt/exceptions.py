from dataclasses import dataclass, replace
from enum import Enum

from sanic.handlers import ErrorHandler
from sanic.response import json


class ErrorKind(Enum):
    INPUT = "input"
    NOT_FOUND = "not_found"
    AMBIGUITY = "ambiguity"
    UPSTREAM = "upstream"


@dataclass
class DeletionError(Exception):
    message: str
    status_code: int = 500
    kind: ErrorKind = ErrorKind.UPSTREAM

    def __str__(self):
        return self.message

    @property
    def response(self):
        return {'error': self.message}

    def prefixed(self, prefix: str) -> 'DeletionError':
        return replace(self, message=f"{prefix}{self.message}")


@dataclass
class InputError(DeletionError):
    status_code: int = 400
    kind: ErrorKind = ErrorKind.INPUT


@dataclass
class NotFoundError(DeletionError):
    message: str = "Not found"
    status_code: int = 404
    kind: ErrorKind = ErrorKind.NOT_FOUND


@dataclass
class AmbiguityError(DeletionError):
    """More than one gateway resource matched where exactly one must exist.

    The gateway is inconsistent when this happens, so it is reported as an internal error
    and never as something the caller can fix.
    """

    status_code: int = 500
    kind: ErrorKind = ErrorKind.AMBIGUITY


@dataclass
class UpstreamError(DeletionError):
    status_code: int = 502
    kind: ErrorKind = ErrorKind.UPSTREAM


def _http_error_handler(request, exc):
    return json(exc.response, exc.status_code)


rest_error_handler = ErrorHandler()
rest_error_handler.add(exception=DeletionError, handler=_http_error_handler)
