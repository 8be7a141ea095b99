class QuoteBuilderError(Exception):
    """Base class for quote builder errors"""
    pass


class ValidationError(QuoteBuilderError):
    """Raised when user input or a required selection is missing or invalid"""
    pass


class NotFoundError(QuoteBuilderError):
    """Raised when an account, contact, part, quote or configuration id is unknown"""
    pass
