# app/domain/exceptions.py
"""
Wyjatki domenowe. Kazdy niesie status HTTP, ktory handler w create_app
zamienia na odpowiedz {message, data}.
"""


class ShopError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(ShopError):
    status_code = 400


class NotFoundError(ShopError):
    status_code = 404


class AlreadyExistsError(ShopError):
    status_code = 409


class AuthTokenError(ShopError):
    status_code = 401


class AuthenticationError(ShopError):
    status_code = 401


class PermissionDeniedError(ShopError):
    status_code = 403


class ConflictError(ShopError):
    status_code = 409


class ConcurrencyConflictError(ConflictError):
    pass


class InsufficientInventoryError(ConflictError):
    pass


class InvalidStatusTransitionError(ConflictError):
    pass


class CheckoutInProgressError(ConflictError):
    pass


class ResourceInUseError(ConflictError):
    pass
