"""Custom exception classes for structured error handling.

Every error renders as ``{"message": ..., "error": ...}``: ``message`` is the
stable, user-facing summary and ``error`` carries the underlying cause.
"""

from typing import Any


class PolyfaqError(Exception):
    """Base exception for all polyfaq errors."""

    def __init__(
        self,
        code: str,
        message: str,
        error: str | None = None,
        status_code: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.error = error if error is not None else message
        self.status_code = status_code
        super().__init__(self.error)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "error": self.error}


class CacheUnavailable(PolyfaqError):
    def __init__(self, error: str = "Cache store unreachable") -> None:
        super().__init__(
            code="CACHE_UNAVAILABLE",
            message="Cache unavailable",
            error=error,
            status_code=503,
        )


class TranslationUnavailable(PolyfaqError):
    def __init__(self, error: str = "Translation provider unreachable") -> None:
        super().__init__(
            code="TRANSLATION_UNAVAILABLE",
            message="Translation unavailable",
            error=error,
            status_code=502,
        )


class InvalidLocale(PolyfaqError):
    def __init__(self, locale: str) -> None:
        self.locale = locale
        super().__init__(
            code="INVALID_LOCALE",
            message="Unsupported locale",
            error=f"Locale '{locale}' is not a supported translation target",
            status_code=400,
        )


class PersistenceError(PolyfaqError):
    def __init__(self, error: str = "Document store operation failed") -> None:
        super().__init__(
            code="PERSISTENCE_ERROR",
            message="Error while accessing FAQ store",
            error=error,
            status_code=500,
        )


class FAQCreationFailed(PolyfaqError):
    """Write path failure. ``cause`` is the translation or persistence error."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        detail = cause.error if isinstance(cause, PolyfaqError) else str(cause)
        super().__init__(
            code="FAQ_CREATION_FAILED",
            message="Error while creating FAQ",
            error=detail,
            status_code=500,
        )


class FAQRetrievalFailed(PolyfaqError):
    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        detail = cause.error if isinstance(cause, PolyfaqError) else str(cause)
        super().__init__(
            code="FAQ_RETRIEVAL_FAILED",
            message="Failed to retrieve FAQs",
            error=detail,
            status_code=500,
        )
