"""
Tagged results returned by the resource client and form controllers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    VALIDATION = 'validation'
    TRANSPORT = 'transport'
    SERVER = 'server'


@dataclass(frozen=True)
class Ok:
    payload: Any = None
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str
    status_code: int | None = None
    ok: bool = field(default=False, init=False)


def validation_error(message):
    return Err(ErrorKind.VALIDATION, message)
