"""
Glob 필터: 파일명(basename) 매칭.

문법 (shell-style):
- '*'        구분자('/')를 제외한 임의 문자열
- '?'        구분자를 제외한 임의 한 문자
- '[...]'    문자 클래스, '[^...]'는 부정, 'a-z' 범위 지원 (비어 있으면 안 됨)
- '\\c'      문자 c 그대로

fnmatch와 달리 잘못된 패턴(닫히지 않은 '[', 끝의 '\\', 잘못된 범위)은
매칭 전에 INVALID_FILTER로 거부한다.
"""

import re

from archivarius.domain.errors import ArchiveError, ErrorCodes


def compile_filter(pattern: str | None) -> re.Pattern[str] | None:
    """
    glob 패턴을 정규식으로 컴파일.

    Args:
        pattern: glob 패턴 (None 또는 빈 문자열이면 필터 없음)

    Returns:
        컴파일된 정규식 또는 None

    Raises:
        ArchiveError: INVALID_FILTER
    """
    if not pattern:
        return None

    try:
        return re.compile(_translate(pattern), re.DOTALL)
    except (ValueError, re.error) as e:
        raise ArchiveError(
            ErrorCodes.INVALID_FILTER,
            filter=pattern,
            cause=str(e),
        ) from e


def matches(compiled: re.Pattern[str] | None, name: str) -> bool:
    """필터가 없으면 항상 True."""
    if compiled is None:
        return True
    return compiled.fullmatch(name) is not None


def _translate(pattern: str) -> str:
    parts: list[str] = []
    i, n = 0, len(pattern)

    while i < n:
        c = pattern[i]
        i += 1
        if c == "*":
            parts.append("[^/]*")
        elif c == "?":
            parts.append("[^/]")
        elif c == "\\":
            if i >= n:
                raise ValueError("trailing escape character")
            parts.append(re.escape(pattern[i]))
            i += 1
        elif c == "[":
            char_class, i = _translate_class(pattern, i)
            parts.append(char_class)
        else:
            parts.append(re.escape(c))

    return "".join(parts)


def _translate_class(pattern: str, i: int) -> tuple[str, int]:
    """'[' 다음 위치부터 문자 클래스 해석. (정규식 조각, 다음 위치) 반환."""
    n = len(pattern)
    negate = False
    if i < n and pattern[i] == "^":
        negate = True
        i += 1

    ranges: list[str] = []
    while True:
        if i >= n:
            raise ValueError("unterminated character class")
        if pattern[i] == "]" and ranges:
            i += 1
            break

        lo, i = _class_char(pattern, i)
        hi = lo
        if i < n and pattern[i] == "-":
            hi, i = _class_char(pattern, i + 1)
            if hi < lo:
                raise ValueError(f"bad character range {lo}-{hi}")

        if lo == hi:
            ranges.append(re.escape(lo))
        else:
            ranges.append(f"{re.escape(lo)}-{re.escape(hi)}")

    return f"[{'^' if negate else ''}{''.join(ranges)}]", i


def _class_char(pattern: str, i: int) -> tuple[str, int]:
    n = len(pattern)
    if i >= n or pattern[i] in "-]":
        raise ValueError("bad character range")
    if pattern[i] == "\\":
        i += 1
        if i >= n:
            raise ValueError("trailing escape character")
    return pattern[i], i + 1
