"""Posting of short summaries of control-plane events to an audit room."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Protocol

logger = logging.getLogger(__name__)


class Kind(str, Enum):
    """Machine-readable category of an audit event."""

    AGENT_CREATED = "agent.created"
    AGENT_STARTED = "agent.started"
    AGENT_STOPPED = "agent.stopped"
    AGENT_RESPAWNED = "agent.respawned"
    AGENT_DELETED = "agent.deleted"
    AGENT_DISABLED = "agent.disabled"
    APPROVAL_REQUESTED = "approval.requested"
    APPROVAL_APPROVED = "approval.approved"
    APPROVAL_DENIED = "approval.denied"
    SECRETS_ROTATED = "secrets.rotated"
    SECRETS_PUSHED = "secrets.pushed"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


_ICONS = {
    Kind.AGENT_CREATED: "🟢",
    Kind.AGENT_STARTED: "▶️",
    Kind.AGENT_STOPPED: "⏹️",
    Kind.AGENT_RESPAWNED: "🔄",
    Kind.AGENT_DELETED: "🗑️",
    Kind.AGENT_DISABLED: "🚫",
    Kind.APPROVAL_REQUESTED: "🔔",
    Kind.APPROVAL_APPROVED: "✅",
    Kind.APPROVAL_DENIED: "❌",
    Kind.SECRETS_ROTATED: "🔑",
    Kind.SECRETS_PUSHED: "📤",
    Kind.ERROR: "🚨",
}
_DEFAULT_ICON = "ℹ️"


@dataclass
class AuditEvent:
    """Data describing one control-plane event to be announced."""

    kind: Kind | str
    message: str = ""
    actor: str = ""
    target: str = ""
    trace_id: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Sender(Protocol):
    """The part of a Matrix client needed to post a notice."""

    def send_notice(self, room_id: str, message: str) -> None:
        ...


def kind_icon(kind: Kind | str) -> str:
    """Return the icon shown in front of events of the given kind."""
    try:
        return _ICONS[Kind(kind)]
    except ValueError:
        return _DEFAULT_ICON


def format_notice(event: AuditEvent) -> str:
    """Render an event as the human-readable notice posted to the room."""
    icon = kind_icon(event.kind)
    if event.target:
        text = f"{icon} {event.target} → {event.message}"
    else:
        text = f"{icon} [{event.kind}] {event.message}"
    if event.trace_id:
        text += f"\n  trace: {event.trace_id}"
    if event.actor:
        text += f"\n  actor: {event.actor}"
    return text


class MatrixNotifier:
    """Posts formatted notices to a Matrix audit room."""

    def __init__(self, sender: Sender, room_id: str) -> None:
        self.sender = sender
        self.room_id = room_id

    def notify(self, event: AuditEvent) -> None:
        """Post the event; send failures are logged, never raised."""
        if not self.room_id:
            return
        try:
            self.sender.send_notice(self.room_id, format_notice(event))
        except Exception as exc:  # noqa: BLE001 - notifications must not break callers
            logger.warning(
                "audit notifier: failed to send room notice room=%s kind=%s err=%s",
                self.room_id, event.kind, exc,
            )
        else:
            logger.debug("audit notifier: sent notice room=%s kind=%s", self.room_id, event.kind)


class NoopNotifier:
    """Notifier used when audit room notifications are disabled."""

    def notify(self, event: AuditEvent) -> None:
        """Do nothing."""