"""Domain error types surfaced to the presentation layer."""

from enum import Enum

HTTP_BAD_REQUEST = 400
HTTP_UNAUTHORIZED = 401
HTTP_FORBIDDEN = 403
HTTP_NOT_FOUND = 404
HTTP_TOO_MANY_REQUESTS = 429


class MealServiceErrorKind(Enum):
    """Closed set of meal retrieval failures."""

    NO_CONNECTION = "no_connection"
    TIMEOUT = "timeout"
    SERVER_ERROR = "server_error"
    INVALID_RESPONSE = "invalid_response"
    MEAL_NOT_FOUND = "meal_not_found"
    NO_MEALS_FOUND = "no_meals_found"
    NETWORK_ERROR = "network_error"
    UNKNOWN = "unknown"
    CANCELLED = "cancelled"


_SILENT_KINDS = {MealServiceErrorKind.UNKNOWN, MealServiceErrorKind.CANCELLED}

_MESSAGES = {
    MealServiceErrorKind.NO_CONNECTION: "No internet connection available",
    MealServiceErrorKind.TIMEOUT: "Request timed out",
    MealServiceErrorKind.INVALID_RESPONSE: "Failed to process server response",
    MealServiceErrorKind.MEAL_NOT_FOUND: "Meal not found",
    MealServiceErrorKind.NO_MEALS_FOUND: "No meals found",
    MealServiceErrorKind.UNKNOWN: "An unknown error occurred",
    MealServiceErrorKind.CANCELLED: "Request was cancelled",
}

_FAILURE_REASONS = {
    MealServiceErrorKind.NO_CONNECTION: "Check your internet connection and try again",
    MealServiceErrorKind.TIMEOUT: "The server took too long to respond",
    MealServiceErrorKind.INVALID_RESPONSE: "The server response format is unexpected",
    MealServiceErrorKind.MEAL_NOT_FOUND: "The requested meal could not be found",
    MealServiceErrorKind.NO_MEALS_FOUND: "No meals are available for this category",
    MealServiceErrorKind.NETWORK_ERROR: "A network-level error occurred",
    MealServiceErrorKind.UNKNOWN: "An unexpected error occurred",
    MealServiceErrorKind.CANCELLED: "The request was cancelled before it finished",
}

_RECOVERY_SUGGESTIONS = {
    MealServiceErrorKind.NO_CONNECTION: (
        "Check your Wi-Fi or cellular connection and try again"
    ),
    MealServiceErrorKind.TIMEOUT: "Try again in a few moments",
    MealServiceErrorKind.INVALID_RESPONSE: (
        "Try updating the app or contact support if the issue persists"
    ),
    MealServiceErrorKind.MEAL_NOT_FOUND: "Try searching for a different meal",
    MealServiceErrorKind.NO_MEALS_FOUND: "Try refreshing or check back later",
    MealServiceErrorKind.NETWORK_ERROR: (
        "Try again later or contact support if the issue persists"
    ),
    MealServiceErrorKind.UNKNOWN: (
        "Try again later or contact support if the issue persists"
    ),
    MealServiceErrorKind.CANCELLED: "No action needed",
}


class MealServiceError(Exception):
    """Failure of a meal retrieval operation, already translated to the domain."""

    def __init__(
        self,
        kind: MealServiceErrorKind,
        *,
        status_code: int | None = None,
        detail: str = "",
    ) -> None:
        self.kind = kind
        self.status_code = status_code
        self.detail = detail
        super().__init__(self.message)

    @classmethod
    def server_error(cls, status_code: int) -> "MealServiceError":
        """Build a server error for an HTTP status code."""
        return cls(MealServiceErrorKind.SERVER_ERROR, status_code=status_code)

    @classmethod
    def network_error(cls, detail: str) -> "MealServiceError":
        """Build a generic network error carrying a description."""
        return cls(MealServiceErrorKind.NETWORK_ERROR, detail=detail)

    @property
    def is_silent(self) -> bool:
        """Whether the presentation layer should show no error at all."""
        return self.kind in _SILENT_KINDS

    @property
    def message(self) -> str:
        if self.kind is MealServiceErrorKind.SERVER_ERROR:
            return f"Server error ({self.status_code})"
        if self.kind is MealServiceErrorKind.NETWORK_ERROR:
            return f"Network error: {self.detail}"
        return _MESSAGES[self.kind]

    @property
    def failure_reason(self) -> str:
        if self.kind is MealServiceErrorKind.SERVER_ERROR:
            return _status_reason(self.status_code)
        return _FAILURE_REASONS[self.kind]

    @property
    def recovery_suggestion(self) -> str:
        if self.kind is MealServiceErrorKind.SERVER_ERROR:
            return _status_suggestion(self.status_code)
        return _RECOVERY_SUGGESTIONS[self.kind]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MealServiceError):
            return NotImplemented
        return (self.kind, self.status_code, self.detail) == (
            other.kind,
            other.status_code,
            other.detail,
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.status_code, self.detail))

    def __repr__(self) -> str:
        return (
            f"MealServiceError(kind={self.kind.name}, "
            f"status_code={self.status_code!r}, detail={self.detail!r})"
        )


class PersistenceError(Exception):
    """Raised when a local store operation fails."""

    def __init__(self, operation: str, meal_id: str | None = None) -> None:
        self.operation = operation
        self.meal_id = meal_id
        target = f" for meal {meal_id}" if meal_id is not None else ""
        super().__init__(f"Persistence operation '{operation}' failed{target}")


def _status_reason(status_code: int | None) -> str:
    if status_code == HTTP_BAD_REQUEST:
        return "Bad request - the server could not understand the request"
    if status_code == HTTP_UNAUTHORIZED:
        return "Unauthorized - authentication required"
    if status_code == HTTP_FORBIDDEN:
        return "Forbidden - access denied"
    if status_code == HTTP_NOT_FOUND:
        return "Not found - the requested resource does not exist"
    if status_code == HTTP_TOO_MANY_REQUESTS:
        return "Too many requests - rate limit exceeded"
    if status_code is not None and 500 <= status_code <= 599:  # noqa: PLR2004
        return "Server error - the server encountered an internal error"
    return "HTTP error occurred"


def _status_suggestion(status_code: int | None) -> str:
    if status_code == HTTP_BAD_REQUEST:
        return "Try refreshing the app or updating to the latest version"
    if status_code in {HTTP_UNAUTHORIZED, HTTP_FORBIDDEN}:
        return "Please check your account credentials"
    if status_code == HTTP_NOT_FOUND:
        return "The content you're looking for may have been moved or deleted"
    if status_code == HTTP_TOO_MANY_REQUESTS:
        return "Please wait a moment before trying again"
    if status_code is not None and 500 <= status_code <= 599:  # noqa: PLR2004
        return "The server is experiencing issues. Please try again later"
    return "Try again later or contact support if the issue persists"
