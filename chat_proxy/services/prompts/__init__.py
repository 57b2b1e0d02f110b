from .canned_replies import (
    DEVELOPER_QUERIES,
    DEVELOPER_REPLY,
    IDENTITY_QUERIES,
    IDENTITY_REPLY,
)

__all__ = [
    "DEVELOPER_QUERIES",
    "DEVELOPER_REPLY",
    "IDENTITY_QUERIES",
    "IDENTITY_REPLY",
]
