"""Error types for timeable.

- TimeableError: base for library-raised errors
- RejectedError: carrier for non-exception rejection reasons
"""

from .errors import RejectedError, TimeableError, as_exception

__all__ = ["RejectedError", "TimeableError", "as_exception"]
