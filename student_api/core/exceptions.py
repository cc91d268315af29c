from typing import Any, Dict, Optional
from fastapi import status


class BaseAPIException(Exception):
    """
    Base class for every custom error raised by the API.
    Handlers render it as the `{status, message}` envelope.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class NotFoundException(BaseAPIException):
    """404: no record for the requested id"""
    def __init__(self, message: str = "No Such Record Found!"):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND
        )


class EmptyResultException(BaseAPIException):
    """404: the collection query returned no rows"""
    def __init__(self, message: str = "No Records Found"):
        super().__init__(
            message=message,
            code="EMPTY_RESULT",
            status_code=status.HTTP_404_NOT_FOUND
        )


class PersistenceException(BaseAPIException):
    """
    500: the database rejected a write (constraint, connection lost,
    transaction aborted...). The session has already been rolled back.
    """
    def __init__(self, message: str = "Something Went Wrong", details: dict = None):
        super().__init__(
            message=message,
            code="PERSISTENCE_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details
        )
