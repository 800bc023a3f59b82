"""Exception classes for the complexnum package."""


class ComplexNumError(Exception):
    """Base class for every error raised by complexnum."""


class DivisionByZeroError(ComplexNumError, ZeroDivisionError):
    """Exception raised when dividing by, or taking the argument of, zero."""

    def __init__(self, message: str = "/ by zero"):
        """
        Initialize division by zero error.

        Args:
            message: Error message
        """
        super().__init__(message)


class MalformedInputError(ComplexNumError, ValueError):
    """Exception raised when a string cannot be parsed."""

    def __init__(self, text: str, message: str | None = None):
        """
        Initialize malformed input error.

        Args:
            text: The original string that failed to parse
            message: Optional error message, derived from text if omitted
        """
        if message is None:
            message = f"{text!r} is not a parsable string"

        super().__init__(message)
        self.text = text


class InvalidRangeError(ComplexNumError, ValueError):
    """Exception raised when range endpoints do not describe a valid interval."""

    def __init__(self, message: str):
        """
        Initialize invalid range error.

        Args:
            message: Error message
        """
        super().__init__(message)


class RangeTooLargeError(ComplexNumError, OverflowError):
    """Exception raised when a range is too large to enumerate."""

    def __init__(self, message: str = "Absolute value of number is too large"):
        """
        Initialize range too large error.

        Args:
            message: Error message
        """
        super().__init__(message)
