"""Line-based diff of two Gosuto YAML documents."""

from __future__ import annotations

MAX_DIFF_LINES = 2000
"""Inputs longer than this are not diffed line by line."""


def lcs_lines(a: list[str], b: list[str]) -> list[str] | None:
    """Return the longest common subsequence of two lists of lines.

    Returns None when either input has more than MAX_DIFF_LINES lines.
    """
    if len(a) > MAX_DIFF_LINES or len(b) > MAX_DIFF_LINES:
        return None

    width = len(b) + 1
    table = [[0] * width]
    for line_a in a:
        prev = table[-1]
        row = [0] * width
        for j, line_b in enumerate(b, start=1):
            if line_a == line_b:
                row[j] = prev[j - 1] + 1
            elif prev[j] > row[j - 1]:
                row[j] = prev[j]
            else:
                row[j] = row[j - 1]
        table.append(row)

    result: list[str] = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            result.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    result.reverse()
    return result


def diff_lines(a: str, b: str) -> str:
    """Compute a simple unified-style diff of two texts.

    Lines only in ``a`` are prefixed with "- ", lines only in ``b`` with
    "+ ", and shared lines with two spaces.  Lines are matched as raw
    strings, so identical lines in different sections may be paired up.
    """
    a_lines = a.rstrip("\n").split("\n")
    b_lines = b.rstrip("\n").split("\n")

    common = lcs_lines(a_lines, b_lines)
    if common is None:
        return (
            f"(configs differ — {len(a_lines)} / {len(b_lines)} lines; "
            "too large for line-by-line diff)"
        )

    out: list[str] = []
    ai = bi = 0
    for shared in common:
        while ai < len(a_lines) and a_lines[ai] != shared:
            out.append(f"- {a_lines[ai]}")
            ai += 1
        while bi < len(b_lines) and b_lines[bi] != shared:
            out.append(f"+ {b_lines[bi]}")
            bi += 1
        out.append(f"  {shared}")
        ai += 1
        bi += 1

    out.extend(f"- {line}" for line in a_lines[ai:])
    out.extend(f"+ {line}" for line in b_lines[bi:])

    return "\n".join(out).rstrip("\n")