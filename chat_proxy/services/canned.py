"""
Canned reply matching.

Pure lookup over a static table; no I/O and no dependency on the upstream
client.
"""
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from chat_proxy.services.prompts import (
    DEVELOPER_QUERIES,
    DEVELOPER_REPLY,
    IDENTITY_QUERIES,
    IDENTITY_REPLY,
)


@dataclass(frozen=True)
class CannedReply:
    """A set of trigger phrases and the reply they produce."""

    name: str
    phrases: Tuple[str, ...]
    case_sensitive: bool
    reply: str

    def matches(self, message: str) -> bool:
        if self.case_sensitive:
            return any(phrase in message for phrase in self.phrases)
        lowered = message.lower()
        return any(phrase.lower() in lowered for phrase in self.phrases)


# Evaluated in order; the first matching entry wins.
# Developer phrases are matched case-sensitively, identity phrases are not.
CANNED_REPLIES: Tuple[CannedReply, ...] = (
    CannedReply(
        name="identity",
        phrases=IDENTITY_QUERIES,
        case_sensitive=False,
        reply=IDENTITY_REPLY,
    ),
    CannedReply(
        name="developer",
        phrases=DEVELOPER_QUERIES,
        case_sensitive=True,
        reply=DEVELOPER_REPLY,
    ),
)


def match_canned_reply(
    message: str, table: Sequence[CannedReply] = CANNED_REPLIES
) -> Optional[CannedReply]:
    """Return the first table entry whose phrases occur in ``message``."""
    for entry in table:
        if entry.matches(message):
            return entry
    return None
