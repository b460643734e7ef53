from __future__ import annotations


def repeat_str(s: str, n: int) -> str:
    if n <= 0:
        return ""
    return s * n
