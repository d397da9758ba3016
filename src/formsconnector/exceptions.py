"""Forms connector exceptions module."""


class ConnectorError(Exception):
    """Base exception for all connector exceptions."""


class ConnectorInvalidBackendError(ConnectorError):
    """Exception raised when the connector backend is invalid."""


class ConnectorNotFoundError(ConnectorError):
    """Exception raised when no connector is registered for a handle."""


class ConfigurationIncompleteError(ConnectorError):
    """Exception raised when a required connector setting is missing."""


class InvalidEmailError(ConnectorError):
    """Exception raised when the submission email is missing or invalid."""

    def __init__(self, email_field, email):
        """Keep the field name and the offending value."""
        super().__init__(f"Invalid or missing email in field {email_field!r}")
        self.email_field = email_field
        self.email = email


class RemoteRejectedError(ConnectorError):
    """Exception raised when the remote API answers with an error status."""

    def __init__(self, status_code, body=None, raw_body=""):
        """Keep the status code and the error body for logging."""
        super().__init__(f"Remote API rejected the request with status {status_code}")
        self.status_code = status_code
        self.body = body or {}
        self.raw_body = raw_body

    @property
    def message(self):
        """Return the error message sent by the remote API."""
        return self.body.get("message") or "Unknown error"

    @property
    def errors(self):
        """Return the error list sent by the remote API."""
        return self.body.get("errors") or []


class RemoteContractViolationError(ConnectorError):
    """Exception raised when a successful response lacks an expected value."""

    def __init__(self, message, response=None):
        """Keep the response body for logging."""
        super().__init__(message)
        self.response = response


class TransportError(ConnectorError):
    """Exception raised when a remote call cannot be completed."""
