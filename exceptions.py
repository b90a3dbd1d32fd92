"""Linkman exceptions."""


class BaseError(Exception):
    """
    Structured exception with a stable code.

    Subclasses declare ``_default_messages`` so callers can raise with the
    code alone and still get a readable message.
    """

    _default_messages: dict[str, str] = {}

    def __init__(
        self,
        code: str,
        message: str | None = None,
        details: dict | None = None,
    ):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.details = details or {}
        super().__init__(self.message)


class LinkmanError(BaseError):
    """
    Structured exception for identity operations.

    Usage:
        try:
            view = IdentityService.cluster(42)
        except LinkmanError as e:
            if e.code == "CONTACT_NOT_FOUND":
                handle_not_found()
    """

    _default_messages = {
        "IDENTIFIER_REQUIRED": "Email or phone number must be provided.",
        "PRIMARY_NOT_FOUND": "Primary contact disappeared unexpectedly",
        "CONTACT_NOT_FOUND": "Contact not found",
    }


class ValidationError(LinkmanError):
    """Caller input is unusable. Raised before any store access."""


class ConsistencyError(LinkmanError):
    """Stored contacts changed underneath a resolution."""
