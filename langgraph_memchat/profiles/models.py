from typing_extensions import NotRequired, TypedDict


class Address(TypedDict, total=False):
    line1: str
    city: str
    postcode: str


class Phone(TypedDict):
    type: str
    number: str


class Profile(TypedDict):
    """Client record as returned by a profile source.

    Kept as a plain dict so checkpointers can persist it in graph state.
    """

    id: str
    first_name: NotRequired[str]
    last_name: NotRequired[str]
    email: NotRequired[str]
    date_of_birth: NotRequired[str]
    gender: NotRequired[str]
    address: NotRequired[Address]
    phones: NotRequired[list[Phone]]
