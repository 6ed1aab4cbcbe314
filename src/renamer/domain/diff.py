from __future__ import annotations

from .models import DiffKind, DiffSegment


def compute_diff(old: str, new: str) -> tuple[list[DiffSegment], list[DiffSegment]]:
    """
    Character-level diff of two names based on their longest common subsequence.

    Returns ``(old_segments, new_segments)``: the first covers ``old`` with
    EQUAL/DELETE runs, the second covers ``new`` with EQUAL/INSERT runs.
    Joining the text of either list reproduces its source string.

    Example:
        >>> old_segs, new_segs = compute_diff("ab", "aXb")
        >>> [(s.text, s.kind.value) for s in new_segs]
        [('a', 'equal'), ('X', 'insert'), ('b', 'equal')]
    """
    if old == new:
        if not old:
            return [], []
        return [DiffSegment(old, DiffKind.EQUAL)], [DiffSegment(new, DiffKind.EQUAL)]

    table = _lcs_table(old, new)

    ops: list[tuple[str, DiffKind]] = []
    i, j = len(old), len(new)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and old[i - 1] == new[j - 1]:
            ops.append((old[i - 1], DiffKind.EQUAL))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            ops.append((new[j - 1], DiffKind.INSERT))
            j -= 1
        else:
            ops.append((old[i - 1], DiffKind.DELETE))
            i -= 1
    ops.reverse()

    old_segments: list[DiffSegment] = []
    new_segments: list[DiffSegment] = []
    for char, kind in ops:
        if kind is not DiffKind.INSERT:
            _append(old_segments, char, kind)
        if kind is not DiffKind.DELETE:
            _append(new_segments, char, kind)
    return old_segments, new_segments


def _append(segments: list[DiffSegment], char: str, kind: DiffKind) -> None:
    if segments and segments[-1].kind is kind:
        segments[-1].text += char
    else:
        segments.append(DiffSegment(char, kind))


def _lcs_table(a: str, b: str) -> list[list[int]]:
    m, n = len(a), len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        row, prev = table[i], table[i - 1]
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    return table
