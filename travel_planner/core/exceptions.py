from typing import Any, Dict, Optional


class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)


class InvalidRequestError(AppException):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details
        )


class NotFoundError(AppException):
    def __init__(self, entity: str, entity_id: Any):
        super().__init__(
            message=f"{entity} not found",
            status_code=404,
            error_code="NOT_FOUND",
            details={"entity": entity, "id": entity_id}
        )


class ConflictError(AppException):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details
        )


class LeaveTypeRequiredError(InvalidRequestError):
    """Single-day selections cannot be committed until a leave type is chosen."""
    def __init__(self, day):
        super().__init__(
            message="A leave type (full, half or quarter) is required for a single-day plan",
            details={"date": day.isoformat()}
        )
        self.error_code = "LEAVE_TYPE_REQUIRED"


class PlanOverlapError(ConflictError):
    def __init__(self, plan_ids):
        super().__init__(
            message="The selected dates overlap an existing vacation plan",
            details={"planIds": list(plan_ids)}
        )
        self.error_code = "PLAN_OVERLAP"


class EmptySelectionError(InvalidRequestError):
    def __init__(self):
        super().__init__(message="The selection contains no workable dates")
        self.error_code = "EMPTY_SELECTION"
