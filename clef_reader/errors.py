"""
Error types raised while decoding compact JSON log events.
"""
from typing import Optional


class ClefReaderError(ValueError):
    """Base class for decode failures"""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number


class StreamFormatError(ClefReaderError):
    """The line is not valid JSON, or its top-level value is not an object"""

    def __init__(self, line_number: int):
        super().__init__(
            f"The data on line {line_number} is not a complete JSON object.",
            line_number,
        )


class RequiredFieldMissing(ClefReaderError):
    """The timestamp field is absent or null"""

    def __init__(self, field: str, line_number: int):
        super().__init__(
            f"The data on line {line_number} does not include the required `{field}` field.",
            line_number,
        )
        self.field = field


class UnsupportedFieldFormat(ClefReaderError):
    """A reserved field has the wrong JSON kind or an unparseable value"""

    def __init__(self, field: str, line_number: int, detail: Optional[str] = None):
        message = f"The value of `{field}` on line {line_number} is not in a supported format."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message, line_number)
        self.field = field


class ArgumentError(TypeError):
    """An entry point was called with a missing or wrongly-typed argument"""
