"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class MediaUploadError(ProviderError):
    """Image host rejected or failed an upload."""

    pass
