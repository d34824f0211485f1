"""Domain error types."""


class InvalidInputError(ValueError):
    """Prediction or actual setlist is missing or structurally malformed.

    Not retryable: the caller must fix the input. HTTP callers map this to a
    4xx response.
    """
