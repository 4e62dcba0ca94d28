"""System prompt assembly.

The system message is built in a fixed order: base instruction, then the
profile block, then the remembered-facts block. Blocks without content are
left out entirely.
"""

from __future__ import annotations

from langchain_core.messages import SystemMessage

from langgraph_memchat.profiles import Profile

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."

PROFILE_HEADER = "\n\nHere is some information about the user you are talking to:\n"
MEMORIES_HEADER = "\n\nWhat you remember about this user:\n"


def get_system_prompt(override: str | None = None, default: str | None = None) -> str:
    """Pick the base instruction: per-call override, then process default, then the built-in prompt."""
    if override is not None:
        return override
    if default is not None:
        return default
    return DEFAULT_SYSTEM_PROMPT


def format_profile(profile: Profile) -> str:
    name = " ".join(part for part in (profile.get("first_name"), profile.get("last_name")) if part)
    lines = [f"User Name: {name}"]

    for label, field in (("Email", "email"), ("DOB", "date_of_birth"), ("Gender", "gender")):
        value = profile.get(field)
        if value:
            lines.append(f"{label}: {value}")

    return "\n".join(lines)


def build_system_message(instruction: str, profile: Profile | None = None, memories: str = "") -> SystemMessage:
    prompt = instruction

    if profile:
        prompt += PROFILE_HEADER + format_profile(profile)

    if memories:
        prompt += MEMORIES_HEADER + memories

    return SystemMessage(content=prompt)
