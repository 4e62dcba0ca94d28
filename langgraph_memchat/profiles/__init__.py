"""Profile sources for resolving a client id to a profile record."""

from langgraph_memchat.common import ConfigurationError
from langgraph_memchat.common.settings import Settings

from .graphql import GraphQLProfileSource
from .mock import MockProfileSource
from .models import Address, Phone, Profile
from .protocol import ProfileLookupError, ProfileSource


def create_profile_source(settings: Settings) -> ProfileSource:
    """Pick the profile source variant from configuration.

    Uses the mock source unless ``USE_MOCK_PROFILES`` is "false".

    Raises:
        ConfigurationError: If the GraphQL source is selected without a token
    """
    if settings.use_mock_profiles:
        return MockProfileSource()

    if not settings.profile_api_token:
        raise ConfigurationError("PROFILE_API_TOKEN must be set when USE_MOCK_PROFILES=false")

    return GraphQLProfileSource(endpoint=settings.profile_api_url, token=settings.profile_api_token)


__all__ = [
    "Address",
    "GraphQLProfileSource",
    "MockProfileSource",
    "Phone",
    "Profile",
    "ProfileLookupError",
    "ProfileSource",
    "create_profile_source",
]
