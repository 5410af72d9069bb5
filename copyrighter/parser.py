# BSD 3-Clause License
#
# Copyright (c) 2020-2025, Faster Speeding
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice, this
#   list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
#
# * Neither the name of the copyright holder nor the names of its
#   contributors may be used to endorse or promote products derived from
#   this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
# DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
# FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
# DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
# SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
# OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
"""Locate and parse an existing copyright notice at the top of a file.

Only the *leading comment region* is searched: the comment and blank lines
which sit at the top of the file, after any preamble (a shebang, a Python
coding cookie or an XML declaration). The first line in that region which
reads `Copyright [(c)|©] <years> ...` is treated as the notice; any later
notice-like lines are left alone.
"""

from __future__ import annotations

__all__ = ["DEFAULT_MAX_LINES", "Notice", "detect_newline", "find_notice", "find_preamble_end"]

import dataclasses
import logging
import re
import typing

from . import errors
from . import styles
from . import years as years_

if typing.TYPE_CHECKING:
    from collections import abc as collections

_LOGGER = logging.getLogger("copyrighter.parser")

DEFAULT_MAX_LINES = 50
"""Default number of lines from the top of a file which are searched for a notice."""

_LINE_PATTERN = re.compile(r"([^\r\n]*)(\r\n|\r|\n|$)")
_SHEBANG_PATTERN = re.compile(r"#!(?!\[)")
_CODING_COOKIE_PATTERN = re.compile(r"[ \t\f]*#.*?coding[:=][ \t]*[-\w.]+")
_XML_DECLARATION_PATTERN = re.compile(r"\s*<\?xml\b")

_YEAR_TOKEN = r"\d\w*(?:\s*[-–—]\s*\d\w*)?"
_LATE_YEAR_TOKEN = r"\d{4}(?:\s*[-–—]\s*\d{4})?"
_NOTICE_PATTERN = re.compile(
    rf"\bcopyright\b(?:\s*(?P<mark>©|\(c\)))?[\s:]*"
    rf"(?:(?P<years>{_YEAR_TOKEN}(?:(?:\s*,\s*|\s+){_YEAR_TOKEN})*)"
    rf"|(?P<holder>[^\r\n]*?)(?<!\w)"
    rf"(?P<late_years>{_LATE_YEAR_TOKEN}(?:(?:\s*,\s*|\s+){_LATE_YEAR_TOKEN})*)(?!\w))",
    re.IGNORECASE,
)


@dataclasses.dataclass(frozen=True, slots=True)
class _Line:
    start: int
    content: str
    newline: str

    @property
    def end(self) -> int:
        """Offset of the end of this line's content (before its newline)."""
        return self.start + len(self.content)

    @property
    def next(self) -> int:
        """Offset of the start of the following line."""
        return self.end + len(self.newline)


@dataclasses.dataclass(frozen=True, slots=True)
class Notice:
    """A copyright notice found in a file.

    `start` and `end` delimit the whole notice line (without its newline) in
    the text it was parsed from; everything outside `[start, end)` belongs to
    the rest of the file.
    """

    organization: str
    """The holder text found around the years.

    This is kept for diagnostics only; rewritten notices always use the
    caller's organization.
    """

    years: frozenset[int]
    """Years listed by the notice (empty if they couldn't be parsed)."""

    delimiters: styles.Delimiters
    """The comment tokens and indentation found around the notice."""

    mark: str
    """The `©` or `(c)` symbol found after "Copyright", or an empty string."""

    start: int
    end: int

    malformed: errors.MalformedYearsError | None = None
    """Set when the notice's years couldn't be parsed."""

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)


def _iter_lines(text: str, /, start: int = 0) -> collections.Iterator[_Line]:
    position = start
    while position < len(text):
        match = _LINE_PATTERN.match(text, position)
        assert match is not None
        yield _Line(position, match.group(1), match.group(2))
        position = match.end()


def detect_newline(text: str, /) -> str:
    """Get the newline sequence used by the text's first line, defaulting to `"\\n"`."""
    for line in _iter_lines(text):
        if line.newline:
            return line.newline

    return "\n"


def find_preamble_end(text: str, /) -> int:
    """Get the offset after any lines which must stay at the very top of the file.

    This covers a `#!` shebang (but not a Rust `#![...]` attribute), a PEP 263
    coding cookie within the first two lines and an XML declaration.
    """
    end = 0
    for index, line in enumerate(_iter_lines(text)):
        if index == 0 and (_SHEBANG_PATTERN.match(line.content) or _XML_DECLARATION_PATTERN.match(line.content)):
            end = line.next

        elif index < 2 and end == line.start and _CODING_COOKIE_PATTERN.match(line.content):
            end = line.next

        else:
            break

    return end


def _parse_line(line: _Line, style: styles.CommentStyle, /) -> Notice | None:
    match = _NOTICE_PATTERN.search(line.content)
    if not match:
        return None

    content = line.content
    suffix_start = len(content)
    if style.block:
        closer = style.block[1]
        close_index = content.rfind(closer, match.end())
        if close_index != -1:
            suffix_start = len(content[:close_index].rstrip())

    years_text = match.group("years")
    organization = content[match.end() : suffix_start]
    if years_text is None:
        # Holder named before the years (e.g. "Copyright Acme Corp 2019")
        years_text = match.group("late_years")
        organization = f"{match.group('holder')} {organization}"

    malformed: errors.MalformedYearsError | None = None
    try:
        years = years_.parse_ranges_text(years_text)

    except errors.MalformedYearsError as exc:
        _LOGGER.debug("Couldn't parse the years in %r", content, exc_info=exc)
        years = frozenset()
        malformed = exc

    return Notice(
        organization=organization.strip(" \t,"),
        years=years,
        delimiters=styles.Delimiters(content[: match.start()], content[suffix_start:]),
        mark=match.group("mark") or "",
        start=line.start,
        end=line.end,
        malformed=malformed,
    )


def find_notice(
    text: str, style: styles.CommentStyle, /, *, max_lines: int = DEFAULT_MAX_LINES
) -> Notice | None:
    """Find the first copyright notice in the file's leading comment region.

    Parameters
    ----------
    text
        Full text of the file.
    style
        Comment style of the file's language.
    max_lines
        Maximum number of lines to search, counted from the end of any
        shebang, coding cookie or XML declaration.

    Returns
    -------
    Notice | None
        The notice if one was found.

        A notice whose years couldn't be parsed is still returned (with an
        empty year set and `malformed` set) so that it can be replaced.
    """
    in_block = False
    preamble_end = find_preamble_end(text)

    for index, line in enumerate(_iter_lines(text, preamble_end)):
        if index >= max_lines:
            break

        stripped = line.content.strip()
        if in_block:
            in_block = style.block is not None and style.block[1] not in stripped

        elif not stripped:
            continue

        elif style.line and stripped.startswith(style.line):
            pass

        elif style.block and stripped.startswith(style.block[0]):
            opener, closer = style.block
            in_block = closer not in stripped[len(opener) :]

        else:
            _LOGGER.debug("Leading comments end at line %s", index)
            break

        if notice := _parse_line(line, style):
            return notice

    return None
