"""
Error kinds raised by the TinyApp core.

Every precondition failure in the services raises one of these, so the
request layer can tell them apart and pick a status code for each
(see tinyapp/api/errors.py). None of them is fatal to the process.
"""


class TinyAppError(Exception):
    """Base class for all TinyApp errors"""

    message = "Something went wrong"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class EmailAlreadyRegistered(TinyAppError):
    message = "An account with this email already exists"


class InvalidCredentials(TinyAppError):
    message = "Email and password are required"


class InvalidURL(TinyAppError):
    message = "Please provide a valid URL"


class NotFound(TinyAppError):
    message = "Short URL not found"


class Forbidden(TinyAppError):
    message = "You do not have permission to access this URL"


class Unauthenticated(TinyAppError):
    message = "You must be logged in to do that"


class GenerationExhausted(TinyAppError):
    """
    No collision-free identifier was found within the retry budget.

    Unlike the other errors this is not the caller's fault: the key space
    is (close to) saturated. Callers should treat it as retryable.
    """
    message = "Could not generate a unique short code"
