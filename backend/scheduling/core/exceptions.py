class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

class SchedulerError(AppError):
    """Raised when the search engine is driven into an invalid state."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, details=details)

class ResourceNotFoundError(AppError):
    """Raised when a catalog lookup references an unknown entity."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} with id {resource_id} not found",
            details={"resource_type": resource_type, "resource_id": resource_id},
        )

class ConfigurationError(AppError):
    """Raised when the calendar or engine configuration is invalid."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, details=details)
