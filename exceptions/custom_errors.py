class InvalidBedNumberError(ValueError):
    """Raised when a bed number does not decode to a configured unit and bed index."""

    pass


class InvalidClinicalRecordError(ValueError):
    """Raised when a clinical record number is not a 5-digit number."""

    pass


class InvalidWardConfigError(ValueError):
    """Raised when the ward configuration (units, index range, age limits) is malformed."""

    pass


class InvalidPatientError(ValueError):
    """Raised when a patient record has an impossible value (e.g. a negative age)."""

    pass


class InvalidBedStateError(ValueError):
    """Raised when a bed state and its patient disagree (a patient is attached exactly when OCCUPIED)."""

    pass


class WardOperationError(Exception):
    """Base class for admission, relocation and flag changes rejected by the ward. The ward is left unchanged."""

    pass


class BedNotFoundError(WardOperationError):
    """Raised when the requested bed does not exist in the ward."""

    pass


class BedNotAvailableError(WardOperationError):
    """Raised when the requested bed is occupied or blocked."""

    pass


class PediatricUnitError(WardOperationError):
    """Raised when a patient under 13 would be placed outside the pediatric unit."""

    pass


class GenderMismatchError(WardOperationError):
    """Raised when roommates would be of different gender."""

    pass


class AgeBracketError(WardOperationError):
    """Raised when an under-16 patient would share a room with a patient aged 16 or over."""

    pass


class IsolationConflictError(WardOperationError):
    """Raised when a patient would share a room with an infectious or VIP patient."""

    pass


class AdjacentBedNotFreeError(WardOperationError):
    """Raised when an infectious or VIP patient needs the adjacent bed blocked but it is not free."""

    pass


class PatientNotFoundError(WardOperationError):
    """Raised when no admitted patient has the given clinical record number."""

    pass


class DuplicatePatientError(WardOperationError):
    """Raised when a clinical record number is already admitted to another bed."""

    pass


class NoRelocationBedError(WardOperationError):
    """Raised when a roommate has to be relocated but no compatible bed is free."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    InvalidBedNumberError: 400,
    InvalidClinicalRecordError: 400,
    InvalidWardConfigError: 400,
    InvalidPatientError: 400,
    InvalidBedStateError: 400,
    BedNotFoundError: 404,
    PatientNotFoundError: 404,
    BedNotAvailableError: 409,
    DuplicatePatientError: 409,
    AdjacentBedNotFreeError: 409,
    NoRelocationBedError: 409,
    PediatricUnitError: 422,
    GenderMismatchError: 422,
    AgeBracketError: 422,
    IsolationConflictError: 422,
}


def status_code_for(exc: Exception, default: int = 500) -> int:
    """Return the HTTP status code mapped to the exception class (or its closest mapped base)."""
    for cls in type(exc).__mro__:
        if cls in CUSTOM_ERRORS:
            return CUSTOM_ERRORS[cls]
    return default
