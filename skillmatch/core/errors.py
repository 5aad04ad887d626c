"""Error kinds raised by the services and mapped to HTTP statuses in ``skillmatch.main``."""
import enum


class ErrorKind(str, enum.Enum):
    INPUT_VALIDATION = "input_validation"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    STORAGE_FAILURE = "storage_failure"


HTTP_STATUS_BY_KIND = {
    ErrorKind.INPUT_VALIDATION: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORAGE_FAILURE: 500,
}


class ServiceError(Exception):
    """Base class for every failure a request handler can report."""

    kind: ErrorKind = ErrorKind.STORAGE_FAILURE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return HTTP_STATUS_BY_KIND[self.kind]


class InputValidationError(ServiceError):
    kind = ErrorKind.INPUT_VALIDATION


class UnauthorizedError(ServiceError):
    kind = ErrorKind.UNAUTHORIZED


class NotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND


class StorageError(ServiceError):
    """The store (or another upstream Supabase service) failed; the message is echoed to the client."""
    kind = ErrorKind.STORAGE_FAILURE

    @classmethod
    def from_exception(cls, exc: Exception) -> "StorageError":
        # DBAPI errors wrapped by SQLAlchemy carry the driver message in .orig
        orig = getattr(exc, "orig", None)
        return cls(str(orig or exc) or exc.__class__.__name__)
