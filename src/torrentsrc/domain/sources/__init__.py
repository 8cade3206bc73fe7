from .base import SourceProtocol
from .exceptions import SourceError, SourceTransportError

__all__ = [
    "SourceError",
    "SourceProtocol",
    "SourceTransportError",
]
