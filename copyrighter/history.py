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
"""Query the years in which files were modified from their git history."""

from __future__ import annotations

__all__ = ["GitHistory", "HistorySource", "StaticHistory"]

import functools
import logging
import pathlib
import shutil
import subprocess  # noqa: S404
import typing

from dateutil import parser as dateutil

from . import errors

if typing.TYPE_CHECKING:
    from collections import abc as collections
    from typing import Self

_LOGGER = logging.getLogger("copyrighter.history")


class HistorySource(typing.Protocol):
    """Source of the years in which files were modified."""

    def years_modified(self, path: pathlib.Path, /) -> frozenset[int] | None:
        """Get the years in which a file was modified.

        Returns
        -------
        frozenset[int] | None
            The years the file was modified in, or [None][] if the file has
            no recorded history (e.g. it's untracked).

        Raises
        ------
        copyrighter.errors.HistoryError
            If the history couldn't be queried.
        """
        ...


class StaticHistory:
    """History source backed by a pre-computed mapping of paths to years."""

    __slots__ = ("_years",)

    def __init__(self, years: collections.Mapping[pathlib.Path | str, collections.Iterable[int]], /) -> None:
        self._years = {pathlib.Path(path): frozenset(value) for path, value in years.items()}

    def years_modified(self, path: pathlib.Path, /) -> frozenset[int] | None:
        return self._years.get(pathlib.Path(path)) or None


def _git_executable() -> str:
    location = shutil.which("git")
    if location is None:
        error_message = "Missing Git executable"
        raise errors.HistoryError(error_message)

    return location


def _year_from_iso_8601(value: str, /) -> int:
    try:
        return dateutil.isoparse(value).year

    except ValueError as exc:
        error_message = f"Git returned an invalid date {value!r}"
        raise errors.HistoryError(error_message) from exc


class GitHistory:
    """History source which reads `git log` for each file.

    Parameters
    ----------
    root
        Top-level directory of the git work tree.
    ignore_commits
        Full SHA1s of commits to ignore (e.g. mass reformatting commits).

        Use [GitHistory.resolve_commits][] to turn refs or short hashes into
        these.
    """

    def __init__(self, root: pathlib.Path, /, *, ignore_commits: collections.Iterable[str] = ()) -> None:
        self._git = _git_executable()
        self._ignore_commits = frozenset(commit.lower() for commit in ignore_commits)
        self._root = root.resolve()

    @classmethod
    def discover(cls, path: pathlib.Path | None = None, /, *, ignore_commits: collections.Iterable[str] = ()) -> Self:
        """Create a history source for the git work tree containing a path.

        Parameters
        ----------
        path
            Path inside the work tree.

            Defaults to the current working directory.

        Raises
        ------
        copyrighter.errors.HistoryError
            If the path isn't in a git work tree.
        """
        path = (path or pathlib.Path.cwd()).resolve()
        cwd = path if path.is_dir() else path.parent
        output = _run_git(_git_executable(), cwd, "rev-parse", "--show-toplevel")
        return cls(pathlib.Path(output.strip()), ignore_commits=ignore_commits)

    @property
    def root(self) -> pathlib.Path:
        """Top-level directory of the work tree."""
        return self._root

    def _run(self, *args: str) -> str:
        return _run_git(self._git, self._root, *args)

    def resolve_commits(self, commit_ishes: collections.Iterable[str], /) -> frozenset[str]:
        """Resolve commit-ish references (branches, tags, short hashes) to full SHA1s.

        Raises
        ------
        copyrighter.errors.HistoryError
            If any of the references couldn't be resolved.
        """
        return frozenset(
            self._run("rev-parse", "--verify", "--quiet", f"{commit_ish}^{{commit}}").strip().lower()
            for commit_ish in commit_ishes
        )

    def ignoring(self, commit_ishes: collections.Iterable[str], /) -> GitHistory:
        """Create a copy of this history source which also ignores the passed commits.

        Raises
        ------
        copyrighter.errors.HistoryError
            If any of the references couldn't be resolved.
        """
        return GitHistory(self._root, ignore_commits=self._ignore_commits | self.resolve_commits(commit_ishes))

    @functools.cached_property
    def first_commit_year(self) -> int:
        """The year of the repository's first commit."""
        output = self._run("log", "--max-parents=0", "--format=%aI").strip()
        if not output:
            error_message = "The repository has no commits"
            raise errors.HistoryError(error_message)

        return _year_from_iso_8601(output.splitlines()[-1])

    def years_modified(self, path: pathlib.Path, /) -> frozenset[int] | None:
        path = path.resolve()
        if not path.is_file():
            error_message = f"No such file {str(path)!r}"
            raise errors.HistoryError(error_message)

        try:
            relative_path = path.relative_to(self._root)

        except ValueError:
            error_message = f"{str(path)!r} is outside of the repository at {str(self._root)!r}"
            raise errors.HistoryError(error_message) from None

        output = self._run("log", "--follow", "-M", "-C", "--format=%H %aI", "--", relative_path.as_posix())
        years: set[int] = set()

        for line in output.splitlines():
            sha, _, date = line.strip().partition(" ")
            if not sha:
                continue

            if sha.lower() in self._ignore_commits:
                _LOGGER.debug("Ignoring commit %s for %s", sha, relative_path)
                continue

            years.add(_year_from_iso_8601(date))

        if not years:
            _LOGGER.debug("No history found for %s", relative_path)
            return None

        return frozenset(years)


def _run_git(git: str, cwd: pathlib.Path, /, *args: str) -> str:
    try:
        output = subprocess.run(  # noqa: S603 - check for execution of untrusted input
            [git, "--no-pager", *args],
            capture_output=True,
            check=True,
            cwd=cwd,
            text=True,
            encoding="utf-8",
        )

    except subprocess.CalledProcessError as exc:
        error_message = f"`git {' '.join(args)}` failed: {exc.stderr.strip() or exc.returncode}"
        raise errors.HistoryError(error_message) from exc

    except OSError as exc:
        error_message = f"Couldn't run git in {str(cwd)!r}: {exc}"
        raise errors.HistoryError(error_message) from exc

    return output.stdout
