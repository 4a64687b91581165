"""Domain errors raised by pydopa."""


class DopaError(Exception):
    """Base class for pydopa failures."""

    error_code = "DOPA_ERROR"


class ValidationError(DopaError, ValueError):
    """Raised when an argument fails validation against a fixed vocabulary or schema."""

    error_code = "VALIDATION_ERROR"


class ResolutionError(DopaError, LookupError):
    """Raised when a country identifier cannot be matched to an ISO 3166-1 entry."""

    error_code = "RESOLUTION_ERROR"


class GeometryError(DopaError, ValueError):
    """Raised when a row's WKT text cannot be turned into a polygon."""

    error_code = "GEOMETRY_ERROR"

    def __init__(self, message: str, row: int) -> None:
        super().__init__(message)
        self.row = row


class ResponseError(DopaError):
    """Raised when the DOPA service returns something other than a record envelope."""

    error_code = "RESPONSE_ERROR"

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url
