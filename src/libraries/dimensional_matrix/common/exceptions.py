"""
Custom exceptions for dimensional matrix library.
"""


class DimensionalMatrixError(Exception):
    """Base exception for dimensional matrix library."""
    
    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class InvalidArgumentError(DimensionalMatrixError, ValueError):
    """Exception raised when a required argument is missing or malformed."""
    
    def __init__(self, message: str, argument_name: str = None,
                 error_code: str = "INVALID_ARGUMENT"):
        super().__init__(message, error_code)
        self.argument_name = argument_name


class OutOfRangeError(DimensionalMatrixError, IndexError):
    """Exception raised when a dimension or key index is outside its bound."""
    
    def __init__(self, message: str, value: int = None, bound: int = None):
        super().__init__(message, "OUT_OF_RANGE")
        self.value = value
        self.bound = bound


class ConfigurationError(InvalidArgumentError):
    """Exception raised when configuration is invalid."""
    
    def __init__(self, message: str, config_field: str = None):
        super().__init__(message, config_field, "CONFIGURATION_ERROR")
        self.config_field = config_field


class FrameBridgeError(DimensionalMatrixError):
    """Exception raised when moving matrix data to or from a DataFrame fails."""
    
    def __init__(self, message: str, bridge_step: str = None):
        super().__init__(message, "FRAME_BRIDGE_ERROR")
        self.bridge_step = bridge_step
