class TimeCampError(Exception):
    """Base class for everything raised while talking to TimeCamp."""


class AuthenticationError(TimeCampError):
    """Raised when no API token is attached to the HTTP session."""


class InvalidRangeError(TimeCampError, ValueError):

    def __init__(self, from_date, to_date):
        super().__init__(f'to date ({to_date:%Y-%m-%d}) cannot be earlier than from date ({from_date:%Y-%m-%d})')
        self.from_date = from_date
        self.to_date = to_date


class FilterNotSupportedError(TimeCampError, NotImplementedError):
    """Raised in strict mode when task or user filters are passed."""


class ServiceError(TimeCampError):

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(TimeCampError, ValueError):

    def __init__(self, field, value, reason=None):
        message = f'cannot decode {field!s} from {value!r}'
        if reason:
            message = f'{message}: {reason}'
        super().__init__(message)
        self.field = field
        self.value = value
