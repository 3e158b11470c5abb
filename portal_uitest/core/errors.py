# core/errors.py
from enum import Enum

from selenium.common.exceptions import (
    NoAlertPresentException,
    NoSuchElementException,
    NoSuchFrameException,
    StaleElementReferenceException,
    TimeoutException,
)


class UITestError(Exception):
    """Base exception for framework failures."""


class ConfigError(UITestError):
    """Configuration file or value is missing or invalid."""


class InvalidInputError(UITestError, ValueError):
    """Input data for an action is empty or unusable."""


class OptionNotFoundError(UITestError):
    """Requested dropdown option does not exist."""


class WindowNotFoundError(UITestError):
    """No window at the requested index."""


class FrameNotFoundError(UITestError):
    """No frame at the requested index."""


class StepAlreadyClosedError(UITestError):
    """A report step was closed more than once."""


class ErrorKind(Enum):
    STALE_ELEMENT = 'stale_element'
    TIMEOUT = 'timeout'
    NOT_FOUND = 'not_found'
    NO_SUCH_FRAME = 'no_such_frame'
    NO_ALERT = 'no_alert'
    GENERIC = 'generic'


# Order matters: more specific driver exceptions first.
_KIND_BY_EXCEPTION = (
    (StaleElementReferenceException, ErrorKind.STALE_ELEMENT),
    (NoSuchFrameException, ErrorKind.NO_SUCH_FRAME),
    (NoAlertPresentException, ErrorKind.NO_ALERT),
    (TimeoutException, ErrorKind.TIMEOUT),
    (NoSuchElementException, ErrorKind.NOT_FOUND),
)


def classify_error(error: BaseException) -> ErrorKind:
    for exc_type, kind in _KIND_BY_EXCEPTION:
        if isinstance(error, exc_type):
            return kind
    return ErrorKind.GENERIC


def error_message(error: BaseException) -> str:
    # WebDriverException.__str__ includes stacktrace noise; prefer .msg
    msg = getattr(error, 'msg', None)
    return msg if msg else str(error)
