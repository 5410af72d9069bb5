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
"""Update copyright notices in files from their git history.

Usage:

```sh
copyrighter --organization "Acme Corp" $(git ls-files '*.py')
```
"""

from __future__ import annotations

__all__ = ["main"]

import argparse
import functools
import itertools
import logging
import pathlib
import sys
import typing

import anyio

from . import config as config_
from . import engine
from . import errors
from . import history as history_
from . import updater

if typing.TYPE_CHECKING:
    from collections import abc as collections

_LOGGER = logging.getLogger("copyrighter")


def comma_split(value: str) -> list[str]:
    """Splits a string by commas and strips the values."""
    return [v.strip() for v in value.split(",") if v.strip()]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        "copyrighter", description="Update copyright notices in files using the years they were changed in git."
    )
    parser.add_argument(
        "-o", "--organization", help="The organization claiming the copyright, and any following text"
    )
    parser.add_argument(
        "-i",
        "--ignore-commits",
        help="Commits to ignore when examining history (can be a comma separate list)",
        action="extend",
        nargs="+",
        type=comma_split,
    )
    parser.add_argument("-j", "--jobs", help="Maximum number of files to process at once", type=int)
    parser.add_argument(
        "--check", help="Don't write any files; exit with 1 if any notice is out of date", action="store_true"
    )
    parser.add_argument(
        "--trim-to-first-commit",
        help="Discard years listed in existing notices which are after the repository's first commit",
        action="store_true",
    )
    parser.add_argument("-v", "--verbose", help="Enable debug logging", action="store_true")
    parser.add_argument("paths", help="The files to update", nargs="+", type=pathlib.Path)
    return parser


def _log_check_result(result: updater.FileResult, /) -> None:
    if result.status is engine.Status.UPDATED:
        for warning in result.warnings:
            _LOGGER.warning("'%s': %s", result.path, warning)

        _LOGGER.error("[ FAIL ] '%s' has an out of date copyright notice", result.path)

    else:
        updater.log_result(result)


async def _run(args: argparse.Namespace, /) -> int:
    try:
        config = await config_.Config.read_async(pathlib.Path.cwd())
        organization = args.organization or config.assert_organization()
        if not organization.strip():
            raise errors.EmptyOrganizationError

    except errors.CopyrighterError as exc:
        _LOGGER.error("%s", exc)  # noqa: TRY400 - Use `logging.exception` instead of `logging.error`
        return 2

    ignore_commits = [*config.ignore_commits, *itertools.chain.from_iterable(args.ignore_commits or ())]
    trim_to_first_commit = args.trim_to_first_commit or config.trim_to_first_commit

    try:
        history = history_.GitHistory.discover()
        if ignore_commits:
            history = history.ignoring(ignore_commits)

        first_commit_year = history.first_commit_year if trim_to_first_commit else None

    except errors.HistoryError as exc:
        _LOGGER.error("%s", exc)  # noqa: TRY400 - Use `logging.exception` instead of `logging.error`
        return 2

    options = config.options(first_commit_year=first_commit_year)
    paths = config.filter_paths(args.paths)
    results = await updater.update_files(
        paths,
        organization=organization,
        history=history,
        options=options,
        overrides=config.extensions,
        fallback_style=config.fallback_style,
        write=not args.check,
        jobs=args.jobs or config.jobs,
        on_result=_log_check_result if args.check else updater.log_result,
    )

    summary = updater.Summary.from_results(results)
    _LOGGER.info("Processed %s files: %s", len(results), summary)

    if summary.failed:
        return 1

    if args.check and summary.counts[engine.Status.UPDATED]:
        return 1

    return 0


def main(argv: collections.Sequence[str] | None = None) -> None:
    """Entry point for the `copyrighter` command."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s:%(message)s")
    sys.exit(anyio.run(functools.partial(_run, args)))


if __name__ == "__main__":
    main()
