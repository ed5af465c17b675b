"""
Generic response schemas for API endpoints.

Provides standardized response wrappers for success and error cases.
"""

from typing import Generic, TypeVar, Optional
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class SuccessResponseModel(BaseModel, Generic[T]):
    """Generic success response wrapper for API endpoints."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status_code": 200,
                "success": True,
                "message": "Operation completed successfully",
                "data": {}
            }
        }
    )

    status_code: int = Field(..., description="HTTP status code")
    success: bool = Field(default=True, description="Success status")
    message: str = Field(..., description="Success message")
    data: Optional[T] = Field(None, description="Response data")


class PaginatedResponseModel(BaseModel, Generic[T]):
    """Documentation model for paginated list responses."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status_code": 200,
                "success": True,
                "message": "Crustaceans retrieved successfully",
                "data": [],
                "totalRows": 25,
                "totalPages": 3,
                "currentPage": 1,
                "hasNextPage": True,
                "hasPreviousPage": False,
            }
        }
    )

    status_code: int
    success: bool = True
    message: str
    data: list[T]
    totalRows: int
    totalPages: int
    currentPage: int
    hasNextPage: bool
    hasPreviousPage: bool


class ErrorResponseModel(BaseModel):
    """Error response model for API endpoints."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status_code": 400,
                "success": False,
                "message": "Validation failed",
                "detail": "VALIDATION_ERROR",
                "errors": ["name: String should have at least 2 characters"]
            }
        }
    )

    status_code: int = Field(..., description="HTTP status code")
    success: bool = Field(default=False, description="Error status (always false)")
    message: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Error detail code")
    errors: Optional[list[str]] = Field(None, description="Itemized validation messages")
