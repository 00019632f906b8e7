"""Custom exceptions for web2md."""


class Web2mdError(Exception):
    """Base exception for web2md operations."""


class FormatError(Web2mdError):
    """Error while formatting a document tree."""


class UnknownNodeTypeError(FormatError):
    """A node kind has no registered renderer."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown node type: {kind}")
        self.kind = kind


class BudgetTooSmallError(FormatError):
    """Fixed markup alone exceeds the character limit."""

    def __init__(self, message: str = "Token limit smaller than empty layout size") -> None:
        super().__init__(message)


class FetchError(Web2mdError):
    """Error during content fetching."""


class GatewayError(FetchError):
    """The upstream search/fetch API failed or could not be reached."""


class ConfigurationError(Web2mdError):
    """Required configuration is missing."""
