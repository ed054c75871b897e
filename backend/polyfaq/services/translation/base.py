"""Abstract translation gateway interface.

Business logic never imports a concrete provider directly.
The concrete gateway is instantiated once in the FastAPI lifespan
and injected everywhere via Depends().
"""

from abc import ABC, abstractmethod


class TranslationGateway(ABC):
    """Abstract base class for text translation providers."""

    @abstractmethod
    async def translate(self, text: str, target_locale: str) -> str:
        """Translate canonical-locale text into ``target_locale``.

        Args:
            text: Non-empty source text in the canonical locale.
            target_locale: One of the supported additional locale codes.

        Returns:
            The translated text. Output for identical input may differ
            between calls.

        Raises:
            ValueError: If ``text`` is empty.
            InvalidLocale: If ``target_locale`` is not a translation target.
            TranslationUnavailable: On network, timeout or provider error.
        """
        ...

    async def close(self) -> None:
        """Release network resources. Default: nothing to release."""
        return None
