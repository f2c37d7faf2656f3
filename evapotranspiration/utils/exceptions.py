"""
Custom exceptions for the evapotranspiration package.

Provides a hierarchical exception system so callers can catch every
library error through a single base class.
"""


class EvapotranspirationError(Exception):
    """
    Base exception for evapotranspiration errors.

    All custom exceptions inherit from this class.
    Provides context information about the error location and details.
    """

    def __init__(self, message: str, details: dict = None, *args):
        super().__init__(message, *args)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message

    def add_detail(self, key: str, value) -> None:
        """
        Add detail information to the exception.

        Args:
            key: Detail key
            value: Detail value
        """
        self.details[key] = value


class InputValidationError(EvapotranspirationError, ValueError):
    """
    Exception raised for invalid function arguments.

    This includes:
    - Angles, day numbers and hour counts outside their physical range
    - Monthly series of the wrong length
    - Values outside an enumerated set
    """

    def __init__(self, message: str, arg_name: str = None, details: dict = None):
        details = dict(details or {})
        if arg_name:
            details["argument"] = arg_name
        super().__init__(message, details)
        self.arg_name = arg_name


class OutOfRangeError(InputValidationError):
    """
    Exception raised when a value violates its documented physical bound.
    """

    def __init__(self, message: str, arg_name: str = None, value: float = None,
                 valid_range: tuple = None):
        details = {}
        if value is not None:
            details["value"] = value
        if valid_range is not None:
            details["valid_range"] = valid_range
        super().__init__(message, arg_name=arg_name, details=details)
        self.value = value
        self.valid_range = valid_range


class LengthMismatchError(InputValidationError):
    """
    Exception raised when a monthly series does not hold one value per month.
    """

    def __init__(self, message: str, arg_name: str = None, actual_length: int = None,
                 expected_length: int = 12):
        details = {"expected_length": expected_length}
        if actual_length is not None:
            details["actual_length"] = actual_length
        super().__init__(message, arg_name=arg_name, details=details)
        self.actual_length = actual_length
        self.expected_length = expected_length


class InvalidArgumentError(InputValidationError):
    """
    Exception raised for a discrete argument outside its enumerated set.
    """

    def __init__(self, message: str, arg_name: str = None, value=None,
                 allowed: tuple = None):
        details = {"value": value}
        if allowed is not None:
            details["allowed"] = allowed
        super().__init__(message, arg_name=arg_name, details=details)
        self.value = value
        self.allowed = allowed


class ConfigurationError(EvapotranspirationError):
    """
    Exception raised for configuration errors.

    This includes:
    - Missing configuration files
    - Unsupported configuration formats
    - Malformed configuration content
    """

    def __init__(self, message: str, config_param: str = None):
        details = {}
        if config_param:
            details["parameter"] = config_param
        super().__init__(message, details)
