class SiteError(Exception):
    """Base class for errors raised by the site server."""


class ConfigError(SiteError):
    pass


class ContactValidationError(SiteError):
    """A contact submission is incomplete or malformed.

    The message is returned to the client as-is.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
