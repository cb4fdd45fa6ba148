"""
Risk query error kinds.

Every failure of a query is terminal: callers get one of these and no
partial payload. The HTTP layer maps `kind` to a status code.
"""


class RiskQueryError(Exception):
    """Base class; `kind` is the stable, client-facing error name."""

    kind = "RiskQueryError"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": self.message}


class EmptyQuery(RiskQueryError):
    """District name, family or date missing (or family not recognised)."""
    kind = "EmptyQuery"
    status_code = 400


class DistrictNotFound(RiskQueryError):
    kind = "DistrictNotFound"
    status_code = 404


class InvalidDate(RiskQueryError):
    kind = "InvalidDate"
    status_code = 422


class StoreUnavailable(RiskQueryError):
    """RecordStore read failed. Not retried."""
    kind = "StoreUnavailable"
    status_code = 503
