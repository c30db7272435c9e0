class AppException(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class InvalidArgumentError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class MailDeliveryError(AppException):
    """Raised by the mail collaborator; never surfaced to service callers."""

    def __init__(self, message: str):
        super().__init__(message, status_code=502)
