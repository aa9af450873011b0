from typing import Any, Dict, Optional


class DynamoDBAccessorError(Exception):
    """Root of every error the accessor raises itself.

    Botocore transport errors are not subclasses and are never converted.

    Attributes:
        message: Human-readable error message
        original_error: Exception this error was raised from, if any
        context: Request details (table, key, violations...) for logs and callers
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = dict(context) if context else {}

    def _context_suffix(self) -> str:
        if not self.context:
            return ""
        pairs = ", ".join(f"{name}={value}" for name, value in self.context.items())
        return f" (Context: {pairs})"

    def __str__(self) -> str:
        return self.message + self._context_suffix()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"original_error={self.original_error!r}, context={self.context!r})"
        )
