"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar
import logging

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from invoiceflow.domain.models.base import DomainException, ValidationError, utc_now

logger = logging.getLogger(__name__)


T = TypeVar('T')
R = TypeVar('R')


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(cls, data: T, metadata: Optional[Dict[str, Any]] = None) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def error_result(
        cls,
        error: str,
        error_code: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            metadata=metadata
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "UseCaseResult[T]":
        """Create error result from exception."""
        if isinstance(exc, ValidationError):
            metadata = {"field": exc.field} if exc.field else None
            return cls.error_result(exc.message, "VALIDATION_ERROR", metadata)
        elif isinstance(exc, PydanticValidationError):
            return cls.error_result(_format_pydantic_errors(exc), "VALIDATION_ERROR")
        elif isinstance(exc, DomainException):
            return cls.error_result(exc.message, exc.code)
        else:
            return cls.error_result(str(exc), "UNKNOWN_ERROR")


def _format_pydantic_errors(exc: PydanticValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return "; ".join(messages)


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Domain and input validation failures come back as error results; anything
    else propagates to the caller.
    """

    def execute(self, request: T = None) -> UseCaseResult[R]:
        """
        Execute the use case with error handling and logging.
        """
        started_at = utc_now()

        try:
            # Validate input
            self._validate_request(request)

            # Execute business logic
            result = self._execute_business_logic(request)

        except (DomainException, PydanticValidationError) as exc:
            failed_at = utc_now()
            error_result = UseCaseResult.from_exception(exc)
            logger.warning(f"{self.__class__.__name__} failed: {error_result.error}")

            error_result.metadata = {
                **(error_result.metadata or {}),
                "execution_time_seconds": (failed_at - started_at).total_seconds(),
                "failed_at": failed_at.isoformat(),
                "exception_type": type(exc).__name__
            }
            return error_result

        finished_at = utc_now()
        return UseCaseResult.success_result(
            result,
            metadata={
                "execution_time_seconds": (finished_at - started_at).total_seconds(),
                "executed_at": finished_at.isoformat()
            }
        )

    def _validate_request(self, request: T) -> None:
        """
        Validate the request. Override in subclasses if needed.
        """
        if isinstance(request, BaseModel):
            # Pydantic models
            request.model_validate(request.model_dump())
        elif hasattr(request, 'validate'):
            # Custom validation
            request.validate()

    @abstractmethod
    def _execute_business_logic(self, request: T) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class QueryUseCase(BaseUseCase[T, R]):
    """
    Base class for query use cases (read operations).
    """
    pass


class CommandUseCase(BaseUseCase[T, R]):
    """
    Base class for command use cases (write operations).
    """

    def _execute_business_logic(self, request: T) -> R:
        result = self._execute_command_logic(request)
        logger.debug(f"{self.__class__.__name__} completed")
        return result

    @abstractmethod
    def _execute_command_logic(self, request: T) -> R:
        """Execute the command logic. Must be implemented by subclasses."""
        pass
