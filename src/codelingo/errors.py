"""codelingo error types.

All custom exceptions inherit from CodelingoError to allow
catching any codelingo-specific error.

A file whose language cannot be determined is not an error:
it is reported as an IdentificationResult without a language.
"""


class CodelingoError(Exception):
    """Base exception for all codelingo errors."""

    pass


class ConfigurationError(CodelingoError):
    """Invalid configuration."""

    pass


class MalformedDefinitionError(CodelingoError):
    """Language, heuristic, filter or classifier definitions are invalid.

    Raised while building the knowledge base; a partially valid base
    is never returned.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class UnreadableContentError(CodelingoError):
    """File content could not be obtained from the content provider."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path
