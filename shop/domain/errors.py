# shop/domain/errors.py


class GatewayError(Exception):
    """Base class for failures the dispatcher reports to the client."""

    status_code = 500
    message = "Internal error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class InvalidModelError(GatewayError):
    status_code = 400
    message = "Invalid model"


class MissingIdError(GatewayError):
    status_code = 400
    message = "Missing id"


class NotFoundError(GatewayError):
    status_code = 404
    message = "Document not found"


class PersistenceError(GatewayError):
    """Any database failure. The client only sees the fixed message."""

    status_code = 500

    MESSAGES = {
        "read": "Failed to fetch items",
        "create": "Failed to create item",
        "update": "Failed to update item",
        "delete": "Failed to delete item",
    }

    def __init__(self, action: str):
        super().__init__(self.MESSAGES[action])
        self.action = action
