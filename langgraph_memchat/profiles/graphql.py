from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any

from .models import Address, Phone, Profile
from .protocol import ProfileLookupError

PATIENT_QUERY = """
query Patient($id: ID!) {
  patient(id: $id) {
    id
    firstName
    lastName
    email
    dob
    gender
    address { address city postcode }
    phones { phoneType phoneNumber }
  }
}
"""


class GraphQLProfileSource:
    """Profile source backed by a patient-management GraphQL API."""

    def __init__(self, *, endpoint: str, token: str, timeout: float = 10.0) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._token = token
        self._timeout = timeout

    def get_profile(self, client_id: str) -> Profile | None:
        payload = {"query": PATIENT_QUERY, "variables": {"id": client_id}}

        request = urllib.request.Request(
            self._endpoint,
            data=json.dumps(payload).encode("utf-8"),
            headers={"Content-Type": "application/json", "x-token": self._token},
            method="POST",
        )

        try:
            with urllib.request.urlopen(request, timeout=self._timeout) as response:
                result = json.loads(response.read().decode("utf-8"))
        except (urllib.error.URLError, TimeoutError, ValueError) as e:
            raise ProfileLookupError(f"Profile lookup for {client_id!r} failed at {self._endpoint}: {e}") from e

        errors = result.get("errors")
        if errors:
            messages = "; ".join(str(err.get("message", err)) for err in errors)
            raise ProfileLookupError(f"Profile lookup for {client_id!r} returned errors: {messages}")

        record = (result.get("data") or {}).get("patient")
        if not record:
            return None

        return to_profile(record)


def to_profile(record: dict[str, Any]) -> Profile:
    """Map an API patient record onto a Profile, keeping only fields that are present."""
    profile: Profile = {"id": str(record["id"])}

    for source, target in (
        ("firstName", "first_name"),
        ("lastName", "last_name"),
        ("email", "email"),
        ("dob", "date_of_birth"),
        ("gender", "gender"),
    ):
        value = record.get(source)
        if value:
            profile[target] = value  # type: ignore[literal-required]

    raw_address = record.get("address") or {}
    address: Address = {}
    for source, target in (("address", "line1"), ("city", "city"), ("postcode", "postcode")):
        if raw_address.get(source):
            address[target] = raw_address[source]  # type: ignore[literal-required]
    if address:
        profile["address"] = address

    phones: list[Phone] = [
        {"type": phone.get("phoneType") or "", "number": phone["phoneNumber"]}
        for phone in record.get("phones") or []
        if phone.get("phoneNumber")
    ]
    if phones:
        profile["phones"] = phones

    return profile
