"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class LookupServiceError(AdapterError):
    """Account store lookup failed (connectivity, timeout, bad response)."""

    pass
