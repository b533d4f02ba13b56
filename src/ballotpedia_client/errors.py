"""Error hierarchy raised by the Ballotpedia client."""


class BallotpediaError(Exception):
    """Base error for every failure surfaced by the client.

    Also raised directly when the API answers with ``success: false``,
    when the response body is not JSON, and when an unexpected failure
    is flattened at an operation boundary.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @property
    def kind(self) -> str:
        """Tag distinguishing the error kind (the class name)."""
        return type(self).__name__


class BallotpediaAPIError(BallotpediaError):
    """Raised when the API returns a non-success HTTP status.

    Args:
        message: Operation-specific failure message.
        status_code: HTTP status code of the response.
        status_text: HTTP reason phrase of the response.
    """

    def __init__(self, message: str, status_code: int, status_text: str) -> None:
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(message)


class BallotpediaValidationError(BallotpediaError):
    """Raised when caller-supplied input violates a precondition.

    Always raised before any network request is made.
    """
