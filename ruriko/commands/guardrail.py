"""Detection of credentials pasted into chat messages."""

from __future__ import annotations

import re

# Vendor-specific credential formats; checked for every message.
_NAMED_SECRET_PATTERNS = [
    re.compile(pattern, re.ASCII)
    for pattern in (
        r"\bsk-[A-Za-z0-9]{20,}\b",
        r"\bsk-proj-[A-Za-z0-9_\-]{20,}\b",
        r"\bsk-ant-[A-Za-z0-9_\-]{20,}\b",
        r"\bAKIA[A-Z0-9]{16}\b",
        r"\bghp_[A-Za-z0-9]{36,}\b",
        r"\bgho_[A-Za-z0-9]{36,}\b",
        r"\bgithub_pat_[A-Za-z0-9_]{20,}\b",
        r"\bxox[baprs]-[A-Za-z0-9\-]{10,}\b",
        r"\b(?:sk|rk|pk)_(?:live|test)_[A-Za-z0-9]{20,}\b",
    )
]

# High-entropy runs; checked only for messages that are not commands.
# 48 characters leaves SHA-1 hashes (40) alone but catches SHA-256 (64).
_GENERIC_SECRET_PATTERNS = [
    re.compile(r"[A-Za-z0-9+/]{48,}={0,2}"),
    re.compile(r"[0-9a-f]{48,}"),
]

SECRET_GUARDRAIL_MESSAGE = (
    "⛔ That looks like a secret. "
    "I won't store or process credentials from chat — they would be visible in room history. "
    "Use `/ruriko secrets set <name>` to store secrets securely via a one-time link."
)


def looks_like_secret(body: str, is_command: bool) -> bool:
    """True when the message appears to contain a credential.

    Commands are checked against vendor patterns only, so that legitimate
    base64 payloads in command arguments are not refused.
    """
    if any(p.search(body) for p in _NAMED_SECRET_PATTERNS):
        return True
    if not is_command:
        return any(p.search(body) for p in _GENERIC_SECRET_PATTERNS)
    return False