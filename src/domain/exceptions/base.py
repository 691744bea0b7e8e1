"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all gateway errors.

    ``http_status`` is the status the gateway answers with when the
    exception reaches the API layer.
    """

    http_status: int = 500

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
