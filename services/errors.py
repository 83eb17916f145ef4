# FILE: services/errors.py


class AIServiceError(RuntimeError):
    """Gemini client could not be used (missing key or empty reply)."""


class AIResponseFormatError(ValueError):
    """Model output was not the JSON shape the caller asked for."""


class UnsupportedFileTypeError(ValueError):
    pass


class TextExtractionError(RuntimeError):
    pass
