"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class FormError(InterfaceError):
    """Multipart form could not be interpreted."""

    pass
