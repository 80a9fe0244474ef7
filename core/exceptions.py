"""
Domain exceptions shared by every Poultry Records app.

Services raise these; ``core.api`` turns them into ``{"error": ...}``
responses with the matching HTTP status.
"""

from rest_framework import status


class PoultryRecordsError(Exception):
    """Base exception for poultry record-keeping errors"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Request could not be processed'

    def __init__(self, message: str = None, code: str = None, details: dict = None):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.code = code or self.__class__.__name__
        self.details = details or {}


class ValidationError(PoultryRecordsError):
    """Raised when a required field is missing or a value is malformed."""
    default_message = 'Invalid request data'


class AllocationError(ValidationError):
    """Raised when coop allocations would exceed the batch size or a coop's capacity."""
    default_message = 'Coop allocation rejected'


class NotFoundError(PoultryRecordsError):
    """Raised when a referenced record does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Record not found'


class InsufficientFlockError(PoultryRecordsError):
    """Raised when recorded mortality exceeds the birds remaining in a batch."""
    status_code = status.HTTP_409_CONFLICT
    default_message = 'Mortality exceeds the remaining birds in this batch'


class InsufficientFundsError(PoultryRecordsError):
    """Raised when a wallet cannot cover a transfer."""
    status_code = status.HTTP_409_CONFLICT
    default_message = 'Insufficient wallet balance'


class StorageError(PoultryRecordsError):
    """Raised when the database rejects a write. The message never carries driver text."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = 'A storage error occurred while processing the request'
