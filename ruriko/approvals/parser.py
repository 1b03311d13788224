"""Parsing of plain `approve <id>` / `deny <id> <reason>` room messages."""

from __future__ import annotations

from dataclasses import dataclass


class NotADecisionError(ValueError):
    """The message is not an approve/deny command at all."""

    def __init__(self, message: str = "not an approval decision") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Decision:
    """The outcome of parsing an approve or deny message."""

    approve: bool
    approval_id: str
    reason: str = ""


def _parse_reason(text: str) -> str:
    text = text.strip()
    if text.lower().startswith("reason="):
        return text[len("reason="):].strip("\"'")
    return text


def parse_decision(text: str) -> Decision:
    """Parse a room message into a Decision.

    Raises NotADecisionError when the message does not start with
    "approve" or "deny", and ValueError when it is malformed.
    """
    text = text.strip()
    lower = text.lower()

    if lower.startswith("approve ") or lower == "approve":
        verb, is_approve = "approve", True
    elif lower.startswith("deny ") or lower == "deny":
        verb, is_approve = "deny", False
    else:
        raise NotADecisionError()

    rest = text[len(verb):].strip()
    if not rest:
        raise ValueError(f"usage: {verb} <approval-id> [reason]")

    approval_id, *reason_words = rest.split()
    reason = _parse_reason(" ".join(reason_words)) if reason_words else ""

    if not is_approve and not reason.strip():
        raise ValueError(
            'deny requires a reason: deny <id> reason="<text>" or deny <id> <text>'
        )

    return Decision(approve=is_approve, approval_id=approval_id, reason=reason)