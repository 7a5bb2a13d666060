"""Base exceptions for HyperRoute."""


class HyperRouteException(Exception):
    """Base exception class for HyperRoute."""
    
    def __init__(self, message: str, error_code: str = None, details: dict = None):
        """Initialize exception.
        
        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            details: Optional additional error details
        """
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}
    
    def __str__(self) -> str:
        """Return string representation of exception."""
        base_msg = super().__str__()
        if self.error_code:
            return f"[{self.error_code}] {base_msg}"
        return base_msg


class ConfigurationError(HyperRouteException):
    """Exception raised for configuration-related errors."""
    pass


class ValidationError(HyperRouteException):
    """Exception raised for validation errors."""
    
    def __init__(self, message: str, field: str = None, value=None, **kwargs):
        """Initialize validation error.
        
        Args:
            message: Error message
            field: Field that failed validation
            value: Invalid value
        """
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class RoutingError(HyperRouteException):
    """Exception raised for routing-related errors."""
    
    def __init__(self, message: str, connection_id: str = None, **kwargs):
        """Initialize routing error.
        
        Args:
            message: Error message
            connection_id: Connection that failed routing
        """
        super().__init__(message, **kwargs)
        self.connection_id = connection_id
