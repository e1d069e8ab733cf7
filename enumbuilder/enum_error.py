import logging
from typing import Callable, Optional

from enumbuilder.error_kinds import ErrorKind, ErrorKinds, Severity

logger = logging.getLogger("enumbuilder")


class EnumError(Exception):
    """
    Base class for every error enumbuilder reports.

    :param str message: Human readable detail of what went wrong.
    :param str location: Operation and arguments the error was detected in, e.g. "get('Colors', 'Purple')".
    :param str severity: Severity.WARN or Severity.ERROR. Defaults to the kind's own severity.
    """

    kind: type[ErrorKind] = ErrorKinds.UNSUPPORTED

    def __init__(self, message: str, location: str = "", severity: Optional[str] = None):
        super().__init__(message)
        if severity is None:
            severity = self.kind.severity
        if severity not in Severity:
            raise ValueError(f"Unknown severity '{severity}'. Expected one of {tuple(Severity)}")
        self.message = message
        self.location = location
        self.severity = severity

    @property
    def recoverable(self) -> bool:
        return self.severity == Severity.WARN

    def __str__(self) -> str:
        text = f"[EnumBuilder] ({self.severity.upper()}) {self.kind.name}"
        if self.location:
            text += f" in {self.location}"
        return f"{text}: {self.message}"


class InvalidEnumError(EnumError, KeyError):
    kind = ErrorKinds.INVALID_ENUM


# Also an AttributeError so getattr(handle, key, default) and hasattr() behave on enum handles
class MissingItemError(EnumError, KeyError, AttributeError):
    kind = ErrorKinds.MISSING_ITEM


class InvalidArgumentsError(EnumError, ValueError):
    kind = ErrorKinds.INVALID_ARGUMENTS


class DuplicateEnumError(EnumError, ValueError):
    kind = ErrorKinds.DUPLICATE_ENUM


class WriteAttemptError(EnumError, AttributeError):
    kind = ErrorKinds.NEW_INDEX


class UnsupportedError(EnumError, RuntimeError):
    kind = ErrorKinds.UNSUPPORTED


Reporter = Callable[[EnumError], None]


def log_error(error: EnumError) -> None:
    """Default reporter. Logs recoverable errors as warnings and everything else as errors.

    Raising is left to the caller, so a reporter only decides how an error is surfaced.
    """
    if error.recoverable:
        logger.warning(str(error))
    else:
        logger.error(str(error))
