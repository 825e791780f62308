"""
Error taxonomy surfaced by the flight API
"""


class FlightServiceError(Exception):
    """Base error carrying the HTTP status it maps to"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FlightServiceError):
    """A required request field is missing or malformed"""

    status_code = 400


class InternalError(FlightServiceError):
    """Unexpected failure while generating offers"""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
