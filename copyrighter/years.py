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
"""Pure helpers for sets and contiguous ranges of years."""

from __future__ import annotations

__all__ = ["YearRange", "format_ranges", "format_years", "merge", "parse_ranges_text", "to_ranges"]

import dataclasses
import re
import typing

from . import errors

if typing.TYPE_CHECKING:
    from collections import abc as collections

_DASH_PATTERN = re.compile(r"\s*[-–—]\s*")
_SEPARATOR_PATTERN = re.compile(r"[,\s]+")
_TOKEN_PATTERN = re.compile(r"(\d{1,4})(?:-(\d{1,4}))?")


@dataclasses.dataclass(frozen=True, slots=True)
class YearRange:
    """An inclusive run of consecutive years."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            error_message = f"Range start {self.start} is after its end {self.end}"
            raise ValueError(error_message)

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)

        return f"{self.start}-{self.end}"

    def __iter__(self) -> collections.Iterator[int]:
        return iter(range(self.start, self.end + 1))


def merge(*year_sets: collections.Iterable[int]) -> frozenset[int]:
    """Union any number of year sets."""
    return frozenset().union(*year_sets)


def to_ranges(years: collections.Iterable[int], /) -> list[YearRange]:
    """Group years into ascending, disjoint and non-adjacent ranges.

    Examples
    --------
    ```py
    >>> to_ranges({2022, 2018, 2019, 2020})
    [YearRange(start=2018, end=2020), YearRange(start=2022, end=2022)]
    ```
    """
    ranges: list[YearRange] = []
    start: int | None = None
    end = 0

    for year in sorted(set(years)):
        if start is not None and year == end + 1:
            end = year
            continue

        if start is not None:
            ranges.append(YearRange(start, end))

        start = end = year

    if start is not None:
        ranges.append(YearRange(start, end))

    return ranges


def format_ranges(ranges: collections.Iterable[YearRange], /) -> str:
    """Render ranges as comma separated `Y` and `Y1-Y2` tokens."""
    return ", ".join(map(str, sorted(ranges, key=lambda range_: range_.start)))


def format_years(years: collections.Iterable[int], /) -> str:
    """Render a set of years in its canonical form (e.g. `"2018-2020, 2022"`)."""
    return format_ranges(to_ranges(years))


def parse_ranges_text(text: str, /) -> frozenset[int]:
    """Parse year text back into a set of years.

    Tokens may be separated by commas and/or whitespace and ranges may use
    `-`, an en dash or an em dash with optional spacing around it.

    Raises
    ------
    copyrighter.errors.MalformedYearsError
        If a token isn't a positive year of at most four digits or a range
        whose start is after its end.
    """
    years: set[int] = set()
    normalised = _DASH_PATTERN.sub("-", text.strip())

    for token in _SEPARATOR_PATTERN.split(normalised):
        if not token:
            continue

        match = _TOKEN_PATTERN.fullmatch(token)
        if not match:
            raise errors.MalformedYearsError(text, token)

        start = int(match.group(1))
        end = int(match.group(2) or start)
        if start < 1 or start > end:
            raise errors.MalformedYearsError(text, token)

        years.update(range(start, end + 1))

    return frozenset(years)
