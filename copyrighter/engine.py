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
"""Reconcile a file's copyright notice with its modification history."""

from __future__ import annotations

__all__ = ["NO_YEARS_REASON", "Options", "Reconciliation", "Status", "reconcile"]

import dataclasses
import enum
import logging
import typing

from . import errors
from . import parser
from . import render
from . import years as years_

if typing.TYPE_CHECKING:
    import pathlib

    from . import history as history_
    from . import styles

_LOGGER = logging.getLogger("copyrighter.engine")

NO_YEARS_REASON = "no years available"
"""Reason given for files which are skipped because no years were found for them."""


class Status(enum.Enum):
    """Outcome of processing a file."""

    UPDATED = "updated"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"
    ERRORED = "errored"


@dataclasses.dataclass(frozen=True, kw_only=True, slots=True)
class Options:
    """Options which control how notices are rendered and reconciled."""

    first_commit_year: int | None = None
    """When set, years listed in existing notices after this are discarded.

    Git history is trusted over existing notices for anything after the
    repository's first commit.
    """

    mark: str | None = None
    """Copyright symbol to render (e.g. `"©"`).

    [None][] keeps the symbol used by the existing notice, if any.
    """

    max_lines: int = parser.DEFAULT_MAX_LINES
    """How many lines from the top of a file to search for an existing notice."""

    rights_reserved: bool = True
    """Whether notices end with "All rights reserved."."""


@dataclasses.dataclass(frozen=True, kw_only=True, slots=True)
class Reconciliation:
    """The result of reconciling one file."""

    status: Status
    text: str
    """The file's new text (the original text unless `status` is `UPDATED`)."""

    years: frozenset[int]
    """The merged years the notice was rendered with."""

    existing: parser.Notice | None = None
    notice: str | None = None
    """The rendered notice line."""

    reason: str | None = None
    """Why the file was skipped."""

    warnings: tuple[Warning, ...] = ()


def _insert(text: str, notice: str, /) -> str:
    position = parser.find_preamble_end(text)
    newline = parser.detect_newline(text)
    head = text[:position]
    tail = text[position:]

    if head and not head.endswith(("\n", "\r")):
        head += newline

    block = notice + newline
    if tail and not tail.startswith(("\n", "\r")):
        block += newline

    return head + block + tail


def reconcile(
    path: pathlib.Path,
    text: str,
    /,
    *,
    organization: str,
    history: history_.HistorySource,
    style: styles.CommentStyle,
    options: Options = Options(),  # noqa: B008 - Do not perform function call in argument defaults
) -> Reconciliation:
    """Bring a file's copyright notice up to date.

    The years listed in the file's existing notice (if any) are merged with
    the years from its history, then the notice is re-rendered and spliced
    back in. A new notice is inserted after any shebang, coding cookie or XML
    declaration if the file has none.

    Parameters
    ----------
    path
        Path of the file; passed to the history source.
    text
        Full text of the file.
    organization
        The organization holding the copyright.
    history
        Source of the years the file was modified in.
    style
        Comment style of the file's language.
    options
        Rendering and reconciliation options.

    Returns
    -------
    Reconciliation
        The new text and status.

        Files with no years from either source are skipped and left untouched.

    Raises
    ------
    copyrighter.errors.EmptyOrganizationError
        If the organization is blank.
    copyrighter.errors.HistoryError
        If the file's history couldn't be queried.
    """
    if not organization.strip():
        raise errors.EmptyOrganizationError

    warnings: list[Warning] = []
    history_years = history.years_modified(path)
    if history_years is None:
        warnings.append(errors.NoHistoryWarning(f"{path} has no recorded history"))
        history_years = frozenset()

    existing = parser.find_notice(text, style, max_lines=options.max_lines)
    existing_years: frozenset[int] = frozenset()

    if existing:
        _LOGGER.debug("Found existing notice in %s listing %s", path, sorted(existing.years))
        if existing.malformed:
            warnings.append(errors.YearParseWarning(existing.malformed))

        existing_years = existing.years
        if options.first_commit_year is not None:
            existing_years = frozenset(year for year in existing_years if year <= options.first_commit_year)

    merged = years_.merge(history_years, existing_years)
    if not merged:
        return Reconciliation(
            status=Status.SKIPPED,
            text=text,
            years=merged,
            existing=existing,
            reason=NO_YEARS_REASON,
            warnings=tuple(warnings),
        )

    if existing:
        delimiters = existing.delimiters
        mark = existing.mark if options.mark is None else options.mark

    else:
        delimiters = style.delimiters()
        mark = options.mark or ""

    notice = render.render_notice(
        organization, merged, delimiters, mark=mark, rights_reserved=options.rights_reserved
    )

    if existing:
        new_text = text[: existing.start] + notice + text[existing.end :]

    else:
        _LOGGER.debug("Inserting a new notice into %s", path)
        new_text = _insert(text, notice)

    return Reconciliation(
        status=Status.UNCHANGED if new_text == text else Status.UPDATED,
        text=new_text,
        years=merged,
        existing=existing,
        notice=notice,
        warnings=tuple(warnings),
    )
