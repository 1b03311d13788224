"""Decoding, hashing and display of stored Gosuto configuration versions."""

from __future__ import annotations

import base64
import binascii
import hashlib
import json
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

_HASH_DISPLAY_LEN = 16
_MXID_DISPLAY_LEN = 18
_MXID_TRUNCATED_LEN = 15
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ContentDecodeError(ValueError):
    """The --content value is not valid base64."""


@dataclass
class GosutoVersion:
    """One stored version of an agent's Gosuto configuration."""

    agent_id: str
    version: int
    hash: str
    yaml_blob: str
    created_by_mxid: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def decode_content(b64: str) -> bytes:
    """Decode base64 content, trying the standard then the URL-safe alphabet."""
    data = b64.replace("\r", "").replace("\n", "")
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        pass
    try:
        return base64.b64decode(data, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ContentDecodeError(f"--content must be valid base64: {exc}") from exc


def content_hash(raw: bytes) -> str:
    """Return the lowercase hex SHA-256 digest of the raw content."""
    return hashlib.sha256(raw).hexdigest()


def parse_version_number(text: str, flag: str) -> int:
    """Read the leading decimal integer of a flag value.

    Trailing text after the number is ignored; raises ValueError when
    no number is present.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"--{flag} must be an integer, got {_quote(text)}")
    return int(match.group(1))


def _short_hash(digest: str) -> str:
    return digest[:_HASH_DISPLAY_LEN] + "…"


def _short_mxid(mxid: str) -> str:
    if len(mxid) > _MXID_DISPLAY_LEN:
        return mxid[:_MXID_TRUNCATED_LEN] + "…"
    return mxid


def format_versions_table(
    agent_id: str, versions: Iterable[GosutoVersion], trace_id: str
) -> str:
    """Render the list of stored versions for an agent as a chat reply."""
    versions = list(versions)
    if not versions:
        return f"No Gosuto versions found for agent **{agent_id}**.\n\n(trace: {trace_id})"

    lines = [
        f"**Gosuto versions for {agent_id}** ({len(versions)})",
        "",
        "```",
        f"{'VER':<5}  {'DATE':<18}  {'BY':<18}  HASH",
        "-" * 72,
    ]
    for v in versions:
        date = v.created_at.strftime("%Y-%m-%d %H:%M")
        lines.append(
            f"v{v.version:<4d}  {date:<18}  {_short_mxid(v.created_by_mxid):<18}  "
            f"{_short_hash(v.hash)}"
        )
    lines.append("```")
    return "\n".join(lines) + f"\n\n(trace: {trace_id})"


def format_show(agent_id: str, version: GosutoVersion, trace_id: str) -> str:
    """Render one stored version, including its YAML, as a chat reply."""
    created = version.created_at.strftime("%Y-%m-%d %H:%M:%S UTC")
    body = version.yaml_blob.rstrip("\n")
    return (
        f"**Gosuto config for {agent_id}** (v{version.version})\n\n"
        f"Hash: `{_short_hash(version.hash)}`\n"
        f"Set by: {version.created_by_mxid}\n"
        f"At: {created}\n\n"
        f"```yaml\n{body}\n```\n\n"
        f"(trace: {trace_id})"
    )