"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidDateFormatError(DomainException):
    """Date text is present but is not a well-formed calendar date"""

    def __init__(self, text: str, reason: str = "not a DD/MM/YYYY date"):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid date {text!r}: {reason}")
