"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External provider returned an error or could not be reached."""

    def __init__(self, provider: str, message: str, status_code: int | None = None):
        self.provider = provider
        self.status_code = status_code
        super().__init__(f"{provider}: {message}")


class EmailDeliveryError(ProviderError):
    """Email provider rejected a message."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__("email", message, status_code)


class MediaStorageError(ProviderError):
    """Media host rejected an upload or deletion."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__("media", message, status_code)
