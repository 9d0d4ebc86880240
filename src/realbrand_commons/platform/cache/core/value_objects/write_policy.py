"""Write policy value object.

ONLY write propagation modes - which tiers a write touches and in what
order. Fixed for a coordinator's lifetime.
"""

from enum import Enum
from typing import Union

from .....core.exceptions import CacheConfigurationError


class WritePolicy(str, Enum):
    """Write propagation policy of the hybrid cache."""

    WRITE_THROUGH = "write-through"
    WRITE_BEHIND = "write-behind"
    WRITE_AROUND = "write-around"

    @classmethod
    def parse(cls, value: Union[str, "WritePolicy"]) -> "WritePolicy":
        """Parse a policy name, accepting ``write_through`` spellings too.

        Raises:
            CacheConfigurationError: Unknown policy
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            raise CacheConfigurationError(
                f"Invalid write policy: {value!r}",
                details={"allowed": [policy.value for policy in cls]},
            ) from None

    @property
    def writes_memory(self) -> bool:
        """Whether a write populates the in-process tier."""
        return self is not WritePolicy.WRITE_AROUND

    @property
    def awaits_remote(self) -> bool:
        """Whether the caller waits for the remote write."""
        return self is not WritePolicy.WRITE_BEHIND
