"""Exception types raised by feedwriter."""


class FeedWriterError(Exception):
    """Base class for all feedwriter errors."""


class InvalidMedium(FeedWriterError, ValueError):
    """Raised when a media medium is not one of the Media RSS mediums."""

    def __init__(self, medium: str):
        self.medium = medium
        super().__init__(f"Invalid medium: {medium!r}")


class InvalidExpression(FeedWriterError, ValueError):
    """Raised when a media expression is not sample, full or nonstop."""

    def __init__(self, expression: str):
        self.expression = expression
        super().__init__(f"Invalid expression: {expression!r}")


class MissingRequiredField(FeedWriterError, ValueError):
    """Raised at serialization when a mandatory field was never set."""

    def __init__(self, entity: str, field: str):
        self.entity = entity
        self.field = field
        super().__init__(f"{entity} requires '{field}' to be set")


class UnknownNamespace(FeedWriterError, KeyError):
    """Raised when an element name uses an undeclared namespace prefix."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(prefix)

    def __str__(self) -> str:
        return f"Namespace prefix '{self.prefix}' is not registered"
