"""Custom exceptions for the Mailgun client.

Defines specific exception types for request validation, builder state
and transport failures to enable precise error handling and logging.

Validation errors deliberately do not inherit from ``ValueError``: they are
raised from inside pydantic validators and must reach the caller unchanged
instead of being folded into ``pydantic.ValidationError``.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""


class MailgunError(Exception):
    """Base exception for all Mailgun client errors.

    Serves as the parent class for all custom exceptions in the client,
    allowing consumers to catch every Mailgun-related error with a single
    except block.

    Example:
        try:
            builder.add_recipient(recipient)
        except MailgunError as e:
            logger.error(f"Mailgun error: {e}")
    """

    pass


class MailgunValidationError(MailgunError):
    """Base exception for request construction failures.

    Attributes:
        message (str): Description of the validation failure.
        field (str, optional): Name of the offending argument.
    """

    def __init__(self, message: str, field: str | None = None):
        """Initialize validation error.

        Args:
            message: Error description.
            field: Optional name of the argument that failed validation.
        """
        super().__init__(message)
        self.field = field


class MissingRequiredFieldError(MailgunValidationError):
    """Raised when a required argument is None, empty or whitespace-only.

    Example:
        raise MissingRequiredFieldError("Username cannot be empty", field="username")
    """

    pass


class OutOfRangeError(MailgunValidationError):
    """Raised when a numeric, size or count constraint is violated.

    Covers password length bounds, the 25MB message budget, the 1000
    recipient cap, result limits, priorities, delivery windows and the
    recipient/recipient-variable parity check.
    """

    pass


class MalformedInputError(MailgunValidationError):
    """Raised when a value fails structural parsing.

    Example:
        raise MalformedInputError("Invalid email address: 'bob@'", field="address")
    """

    pass


class InvalidOperationError(MailgunError):
    """Raised when an operation violates a builder's state machine.

    Example:
        raise InvalidOperationError("Route expression can only be set once")
    """

    pass


class MailgunConfigError(MailgunError):
    """Exception raised for configuration errors.

    Indicates invalid or missing configuration in MailgunConfig.

    Example:
        raise MailgunConfigError("MAILGUN_API_KEY environment variable not set")
    """

    pass


class MailgunClientError(MailgunError):
    """Exception raised for HTTP transport failures.

    Indicates the request never produced a response (connection refused,
    timeout, protocol error). HTTP error statuses are returned to the
    caller, not raised.

    Attributes:
        message (str): Description of the transport error.
        status_code (int, optional): HTTP status when one was received.
        is_transient (bool): Whether error is temporary (retry recommended).

    Example:
        raise MailgunClientError(
            "Timeout talking to api.mailgun.net",
            is_transient=True
        )
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_transient: bool = False,
    ):
        """Initialize Mailgun client error.

        Args:
            message: Error description.
            status_code: Optional HTTP status code.
            is_transient: Whether error is temporary and retryable.
        """
        super().__init__(message)
        self.status_code = status_code
        self.is_transient = is_transient
