from django.core.exceptions import ValidationError


class InvalidInputError(ValidationError):
    """Raised when an invoice is given a negative or malformed amount or count."""

    def __init__(self, message, params=None):
        super().__init__(message, code='invalid_input', params=params)
