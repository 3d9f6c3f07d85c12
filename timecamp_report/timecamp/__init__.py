from .api import TimeCampAPI
from .errors import (TimeCampError, AuthenticationError, InvalidRangeError, FilterNotSupportedError,
                     ServiceError, DecodeError)
from .model import TimeEntry, same_entry, unique_entries
