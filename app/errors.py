# app/errors.py
from typing import Optional


class ServiceError(Exception):
    """Base class for failures the HTTP layer knows how to report."""


class MissingCredentialsError(ServiceError):
    """No API key configured for the model provider."""


class ModelCallError(ServiceError):
    """The upstream model API answered with an error status (or not at all)."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
