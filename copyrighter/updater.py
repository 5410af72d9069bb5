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
"""Read files, reconcile their notices and write back the ones which changed."""

from __future__ import annotations

__all__ = ["FileResult", "Summary", "log_result", "run_update", "update_file", "update_files"]

import codecs
import collections
import dataclasses
import functools
import logging
import os
import pathlib
import typing

import anyio
import anyio.to_thread

from . import engine
from . import errors
from . import styles

if typing.TYPE_CHECKING:
    from collections import abc

    from . import history as history_

_LOGGER = logging.getLogger("copyrighter.updater")


@dataclasses.dataclass(frozen=True, kw_only=True, slots=True)
class FileResult:
    """Outcome of processing a single file."""

    path: pathlib.Path
    status: engine.Status
    notice: str | None = None
    reason: str | None = None
    warnings: tuple[Warning, ...] = ()
    error: Exception | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class Summary:
    """Aggregate counts of file outcomes."""

    counts: collections.Counter[engine.Status]

    @classmethod
    def from_results(cls, results: abc.Iterable[FileResult], /) -> Summary:
        return cls(collections.Counter(result.status for result in results))

    @property
    def failed(self) -> bool:
        """Whether any file errored."""
        return self.counts[engine.Status.ERRORED] > 0

    def __str__(self) -> str:
        return ", ".join(f"{self.counts[status]} {status.value}" for status in engine.Status)


def _decode(path: pathlib.Path, data: bytes, /) -> tuple[str, str]:
    bom = ""
    if data.startswith(codecs.BOM_UTF8):
        bom = codecs.BOM_UTF8.decode()
        data = data[len(codecs.BOM_UTF8) :]

    try:
        return bom, data.decode("utf-8")

    except UnicodeDecodeError as exc:
        error_message = f"{str(path)!r} isn't valid UTF-8"
        raise errors.UndecodableFileError(error_message) from exc


def update_file(
    path: pathlib.Path,
    /,
    *,
    organization: str,
    history: history_.HistorySource,
    options: engine.Options = engine.Options(),  # noqa: B008 - Do not perform function call in argument defaults
    overrides: abc.Mapping[str, styles.CommentStyle] | None = None,
    fallback_style: styles.CommentStyle | None = styles.CommentStyle.HASH,
    write: bool = True,
) -> FileResult:
    """Update the copyright notice of a single file.

    Errors which only affect this file are returned as a result with the
    `ERRORED` status rather than raised.

    Parameters
    ----------
    path
        Path of the file to update.
    organization
        The organization holding the copyright.
    history
        Source of the years the file was modified in.
    options
        Rendering and reconciliation options.
    overrides
        File suffix or name to comment style overrides.
    fallback_style
        Comment style for unrecognised files.

        If this is [None][] then unrecognised files error.
    write
        Whether to write the updated text back to the file.

    Raises
    ------
    copyrighter.errors.EmptyOrganizationError
        If the organization is blank.
    """
    try:
        bom, text = _decode(path, path.read_bytes())
        style = styles.style_for_path(path, overrides=overrides, fallback=fallback_style)
        result = engine.reconcile(path, text, organization=organization, history=history, style=style, options=options)

        if result.status is engine.Status.UPDATED and write:
            path.write_bytes((bom + result.text).encode("utf-8"))

    except errors.EmptyOrganizationError:
        raise

    except (errors.CopyrighterError, OSError) as exc:
        return FileResult(path=path, status=engine.Status.ERRORED, error=exc)

    except Exception as exc:  # noqa: BLE001  # Do not catch blind exception: `Exception`
        _LOGGER.debug("Unexpected error while updating '%s'", path, exc_info=exc)
        return FileResult(path=path, status=engine.Status.ERRORED, error=exc)

    return FileResult(
        path=path, status=result.status, notice=result.notice, reason=result.reason, warnings=result.warnings
    )


async def update_files(
    paths: abc.Iterable[pathlib.Path],
    /,
    *,
    organization: str,
    history: history_.HistorySource,
    options: engine.Options = engine.Options(),  # noqa: B008 - Do not perform function call in argument defaults
    overrides: abc.Mapping[str, styles.CommentStyle] | None = None,
    fallback_style: styles.CommentStyle | None = styles.CommentStyle.HASH,
    write: bool = True,
    jobs: int | None = None,
    on_result: abc.Callable[[FileResult], None] | None = None,
) -> list[FileResult]:
    """Update the copyright notices of multiple files on a pool of worker threads.

    Parameters
    ----------
    paths
        Paths of the files to update.
    organization
        The organization holding the copyright.
    history
        Source of the years the files were modified in.

        This is called from multiple threads at once.
    options
        Rendering and reconciliation options.
    overrides
        File suffix or name to comment style overrides.
    fallback_style
        Comment style for unrecognised files.
    write
        Whether to write updated files back.
    jobs
        Maximum number of files to process at once.

        Defaults to the number of CPUs.
    on_result
        Called with each file's result as it finishes.

    Returns
    -------
    list[FileResult]
        The results in the same order as `paths`.

    Raises
    ------
    copyrighter.errors.EmptyOrganizationError
        If the organization is blank; no files are touched.
    """
    if not organization.strip():
        raise errors.EmptyOrganizationError

    paths = list(paths)
    results: list[FileResult | None] = [None] * len(paths)
    limiter = anyio.CapacityLimiter(jobs or os.cpu_count() or 1)
    callback = functools.partial(
        update_file,
        organization=organization,
        history=history,
        options=options,
        overrides=overrides,
        fallback_style=fallback_style,
        write=write,
    )

    async def process(index: int, path: pathlib.Path, /) -> None:
        result = await anyio.to_thread.run_sync(callback, path, limiter=limiter)
        results[index] = result
        if on_result:
            on_result(result)

    _LOGGER.debug("Processing %s files with up to %s workers", len(paths), limiter.total_tokens)
    async with anyio.create_task_group() as task_group:
        for index, path in enumerate(paths):
            task_group.start_soon(process, index, path)

    return typing.cast("list[FileResult]", results)


def run_update(paths: abc.Iterable[pathlib.Path], /, **kwargs: typing.Any) -> list[FileResult]:  # noqa: ANN401
    """Synchronous version of [update_files][copyrighter.updater.update_files]."""
    return anyio.run(functools.partial(update_files, paths, **kwargs))


def log_result(result: FileResult, /) -> None:
    """Log a one line status for a file's result, followed by any warnings."""
    for warning in result.warnings:
        _LOGGER.warning("'%s': %s", result.path, warning)

    if result.status is engine.Status.UPDATED:
        _LOGGER.info("[  OK  ] Updated '%s'", result.path)

    elif result.status is engine.Status.UNCHANGED:
        _LOGGER.info("[ SAME ] '%s' (already up-to-date)", result.path)

    elif result.status is engine.Status.SKIPPED:
        _LOGGER.warning("[ SKIP ] '%s': %s", result.path, result.reason)

    else:
        _LOGGER.error("[ FAIL ] Failed to update '%s': %s", result.path, result.error)
