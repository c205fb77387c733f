"""
Base DTOs for the application layer.
Drafts are partially filled records edited by callers and converted to domain
entities only when they are saved.
"""

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
        # Reject unknown fields
        extra="forbid",
    )


class DraftDTO(BaseDTO):
    """Base class for editable drafts of domain records."""
    pass
