from listfresh.constants import (
    FETCH_FAILED_MESSAGE,
    INVALID_COLLECTION_MESSAGE,
    INVALID_URI_MESSAGE,
    LIST_NOT_FOUND_MESSAGE,
)
from listfresh.enums import ErrorCode


class ValidationError(ValueError):
    pass


class LocatorError(ValidationError):
    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class ResolutionError(Exception):
    code: ErrorCode = ErrorCode.fetch_failed
    status_code: int = 500
    default_message: str = FETCH_FAILED_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ListNotFoundError(ResolutionError):
    code = ErrorCode.list_not_found
    status_code = 404
    default_message = LIST_NOT_FOUND_MESSAGE


class FetchFailedError(ResolutionError):
    pass


def require(condition: bool, message: str) -> None:
    if not condition:
        raise ValidationError(message)


def malformed_locator() -> LocatorError:
    return LocatorError(ErrorCode.malformed_locator, INVALID_URI_MESSAGE)


def wrong_collection(collection: str) -> LocatorError:
    return LocatorError(ErrorCode.wrong_collection, f"{INVALID_COLLECTION_MESSAGE}: {collection}")
