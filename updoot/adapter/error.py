"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class MailError(AdapterError):
    """Outbound email could not be delivered."""

    pass
