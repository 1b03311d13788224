# ruriko

Helpers for a chat-driven control plane that manages AI agents from a Matrix
room. The package uses only the standard library.

## What it provides

### Approval decisions: `ruriko.approvals.parser`

`parse_decision(text)` reads a plain room message of the form
`approve <id> [reason]` or `deny <id> <reason>`. The verb is matched without
regard to case. The reason may be given as `reason="<text>"`. It returns a
frozen `Decision` with the fields `approve`, `approval_id` and `reason`.

- It raises `NotADecisionError` when the message does not start with
  `approve` or `deny`. Treat such a message as ordinary chat.
- It raises `ValueError` when the message is malformed: an id is missing, or a
  `deny` has no reason. `NotADecisionError` is itself a subclass of
  `ValueError`, so catch it first.

### Audit room notices: `ruriko.audit.notifier`

- `Kind` lists the event categories, such as `agent.created`,
  `approval.approved` and `error`.
- `AuditEvent` holds one event: `kind`, `message`, `actor`, `target`,
  `trace_id` and `timestamp`.
- `kind_icon(kind)` returns the icon for a kind. Unknown kinds get `ℹ️`.
- `format_notice(event)` renders the notice text, with trace and actor lines
  when they are set.
- `MatrixNotifier(sender, room_id)` posts notices through any object that has
  a `send_notice(room_id, message)` method.
  - It does nothing when `room_id` is empty.
  - When sending fails, it logs a warning and does not raise.
- `NoopNotifier` discards every event.

### Commands: `ruriko.commands`

`guardrail.looks_like_secret(body, is_command)` reports whether a message
seems to contain a credential. It checks vendor key formats such as OpenAI,
Anthropic, AWS, GitHub, Slack and Stripe. Unless `is_command` is true, it also
catches long base64 or hex runs of 48 characters or more. The suggested reply
is in `SECRET_GUARDRAIL_MESSAGE`.

`diff.diff_lines(a, b)` returns a line diff of two texts.

- Removed lines are prefixed with `- `, added lines with `+ `, and shared
  lines with two spaces.
- `lcs_lines(a, b)` gives the longest common subsequence of two lists of
  lines. It returns `None` when either list is longer than `MAX_DIFF_LINES`
  (2000). In that case `diff_lines` returns a one-line summary instead of a
  diff.

`gosuto_content` deals with stored configuration versions:

| Name | What it does |
| --- | --- |
| `decode_content(b64)` | Decodes standard or URL-safe base64. Raises `ContentDecodeError` otherwise. |
| `content_hash(raw)` | Returns the hex SHA-256 of the bytes. |
| `parse_version_number(text, flag)` | Reads the leading integer of a flag value. Raises `ValueError`. |
| `GosutoVersion` | Holds one stored version: agent, number, hash, YAML, author, time. |
| `format_versions_table(agent_id, versions, trace_id)` | Renders the list of versions as a chat reply. |
| `format_show(agent_id, version, trace_id)` | Renders a single version as a chat reply. |

## Example

```python
from ruriko.approvals.parser import NotADecisionError, parse_decision
from ruriko.audit.notifier import AuditEvent, Kind, MatrixNotifier
from ruriko.commands.diff import diff_lines
from ruriko.commands.guardrail import looks_like_secret


class PrintSender:
    def send_notice(self, room_id, message):
        print(room_id, message)


try:
    decision = parse_decision('deny a3f2b1c4d5e6 reason="too risky"')
except NotADecisionError:
    decision = None

notifier = MatrixNotifier(PrintSender(), "!audit:example.com")
notifier.notify(AuditEvent(kind=Kind.APPROVAL_DENIED, target=decision.approval_id,
                           message=decision.reason, actor="@bob:example.com"))

print(looks_like_secret("hello there", is_command=False))   # False
print(diff_lines("a: 1\nb: 2\n", "a: 1\nb: 3\n"))
```

## What this package does not do

- It does not store approvals, and it does not create, expire or resolve them.
  It only parses the `approve`/`deny` messages.
- It does not keep configuration versions in any database.
- It does not connect to Matrix. Notices go through the sender object you
  supply.
- It has no command-line program and no server.

## Tests

```
pip install -e .[test]
pytest
```