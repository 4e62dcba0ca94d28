import time

from .models import Profile


class MockProfileSource:
    """Profile source returning canned data, for development and tests.

    Every client id resolves to the same person; only ``id`` varies.
    """

    def __init__(self, *, delay: float = 0.0) -> None:
        """Initialize mock source.

        Args:
            delay: Seconds to sleep per lookup, to simulate network latency
        """
        self.delay = delay

    def get_profile(self, client_id: str) -> Profile | None:
        if self.delay:
            time.sleep(self.delay)

        return {
            "id": client_id,
            "first_name": "John",
            "last_name": "Doe",
            "email": "john.doe@example.com",
            "date_of_birth": "1985-05-15",
            "gender": "Male",
            "address": {
                "line1": "123 Baker Street",
                "city": "London",
                "postcode": "NW1 6XE",
            },
            "phones": [{"type": "mobile", "number": "+447700900123"}],
        }
