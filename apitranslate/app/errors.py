class ApiTranslateError(Exception):
    """Base error for the translation API."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TranslationFailure(ApiTranslateError):
    """The translation provider could not translate the text."""


class PersistenceFailure(ApiTranslateError):
    """The translation store failed to read or write."""


class NotFound(ApiTranslateError):
    def __init__(self, translation_id: int) -> None:
        self.translation_id = translation_id
        super().__init__(f"Translation {translation_id} not found.")
