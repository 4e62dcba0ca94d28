from typing import Protocol

from .models import Profile


class ProfileLookupError(RuntimeError):
    """Raised by a profile source when the backing service cannot answer."""


class ProfileSource(Protocol):
    """Protocol for resolving a client identifier to its profile record."""

    def get_profile(self, client_id: str) -> Profile | None:
        """Fetch the profile for ``client_id``.

        Args:
            client_id: Non-empty client identifier

        Returns:
            The profile, or None if the source has no record for the client

        Raises:
            ProfileLookupError: If the source could not be reached or answered with an error
        """
        ...
