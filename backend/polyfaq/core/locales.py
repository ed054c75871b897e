"""Supported locale set, derived from settings and injected into both FAQ paths."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LocaleSet:
    """The canonical authoring locale plus the locales every FAQ is translated into."""

    canonical: str = "en"
    additional: tuple[str, ...] = ()

    @property
    def all(self) -> tuple[str, ...]:
        return (self.canonical, *self.additional)

    def is_supported(self, code: str) -> bool:
        return code in self.all

    def is_translation_target(self, code: str) -> bool:
        return code in self.additional

    def resolve(self, code: str | None) -> str:
        """Map a requested language onto a supported code.

        Missing or unsupported codes resolve to the canonical locale.
        """
        if not code:
            return self.canonical
        code = code.strip().lower()
        return code if self.is_supported(code) else self.canonical
