"""Error taxonomy shared by the domain, infra and interface layers."""


class GenPiError(Exception):
    """Base class for every error raised by genpi."""


class NotHiragana(GenPiError, ValueError):
    """Raised when a transliteration input contains a non-hiragana character."""

    def __init__(self, char: str, text: str | None = None):
        self.char = char
        self.text = text
        super().__init__(f"{char!r} is not hiragana")


class NotKatakana(GenPiError, ValueError):
    """Raised when a reverse transliteration input is not full-width katakana."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"{char!r} is not katakana")


class FetchFailure(GenPiError):
    """The upstream name list could not be fetched or parsed."""


class Conflict(GenPiError):
    """Another request currently holds the cache slot for this sex."""

    def __init__(self, sex):
        self.sex = sex
        super().__init__(f"names cache slot for {sex.value} is busy")


class InvalidConfiguration(GenPiError, ValueError):
    """Raised at startup when an environment variable has a bad value."""


class BadRequest(GenPiError, ValueError):
    """Raised when request flags are inconsistent (e.g. halfwidth alone)."""
