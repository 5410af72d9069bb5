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
"""Development tasks for Copyrighter."""

from __future__ import annotations

__all__: list[str] = [
    "build",
    "cleanup",
    "freeze_locks",
    "lint",
    "reformat",
    "slot_check",
    "spell_check",
    "test",
    "test_coverage",
    "type_check",
    "update_copyright",
]

import pathlib
import re
import typing

import nox

if typing.TYPE_CHECKING:
    from collections import abc as collections

_PROJECT_NAME = "copyrighter"
_TOP_LEVEL_TARGETS = ["./copyrighter", "./noxfile.py", "./tests"]

nox.options.sessions = ["reformat", "lint", "spell-check", "slot-check", "type-check", "test"]


def _tracked_files(session: nox.Session) -> collections.Iterable[str]:
    output = session.run("git", "--no-pager", "grep", "--threads=1", "-l", "", external=True, log=False, silent=True)
    assert isinstance(output, str)
    return output.splitlines()


def _install_deps(session: nox.Session, /, *groups: str) -> None:
    session.run_install(
        "uv",
        "sync",
        *map("--group={}".format, groups),
        env={"UV_PROJECT_ENVIRONMENT": session.virtualenv.location},
    )


@nox.session(venv_backend="none")
def cleanup(session: nox.Session) -> None:
    """Cleanup any temporary files made in this project by its nox tasks."""
    import shutil  # noqa: PLC0415  # `import` should be at the top-level of a file

    # Remove directories
    for raw_path in ["./dist", "./.nox", "./.pytest_cache", "./coverage_html", ".mypy_cache", ".ruff_cache"]:
        path = pathlib.Path(raw_path)
        try:
            shutil.rmtree(str(path.absolute()))

        except FileNotFoundError:
            session.warn(f"[ SKIP ] '{raw_path}'")

        except Exception as exc:  # noqa: BLE001  # Do not catch blind exception: `Exception`
            session.error(f"[ FAIL ] Failed to remove '{raw_path}': {exc!s}")

        else:
            session.log(f"[  OK  ] Removed '{raw_path}'")

    # Remove individual files
    for raw_path in ["./.coverage", "./coverage.xml"]:
        path = pathlib.Path(raw_path)
        try:
            path.unlink()

        except FileNotFoundError:
            session.warn(f"[ SKIP ] '{raw_path}'")

        except Exception as exc:  # noqa: BLE001  # Do not catch blind exception: `Exception`
            session.error(f"[ FAIL ] Failed to remove '{raw_path}': {exc!s}")

        else:
            session.log(f"[  OK  ] Removed '{raw_path}'")


@nox.session(name="freeze-locks", venv_backend="none")
def freeze_locks(session: nox.Session) -> None:
    """Freeze the dependency locks."""
    session.run("uv", "lock", "--upgrade", external=True)


@nox.session(reuse_venv=True, venv_backend="uv")
def lint(session: nox.Session) -> None:
    """Run this project's modules against the pre-defined ruff linters."""
    _install_deps(session, "lint")
    session.log("Running ruff")
    session.run("ruff", "check", *_TOP_LEVEL_TARGETS, log=False)


@nox.session(reuse_venv=True, name="slot-check", venv_backend="uv")
def slot_check(session: nox.Session) -> None:
    """Check this project's slotted classes for common mistakes."""
    _install_deps(session, "lint")
    session.run("slotscheck", "-v", "-m", _PROJECT_NAME)


@nox.session(reuse_venv=True, name="spell-check", venv_backend="uv")
def spell_check(session: nox.Session) -> None:
    """Check this project's text-like files for common spelling mistakes."""
    _install_deps(session, "lint")
    session.log("Running codespell")
    session.run("codespell", *_tracked_files(session), log=False)


@nox.session(reuse_venv=True, venv_backend="uv")
def build(session: nox.Session) -> None:
    """Build this project using flit."""
    session.install("flit")
    session.log("Starting build")
    session.run("flit", "build")


_NOTICE_FILE_PATTERN = re.compile(r".+\.pyi?")


@nox.session(name="update-copyright", reuse_venv=True, venv_backend="uv")
def update_copyright(session: nox.Session) -> None:
    """Bring the copyright notices of this project's files up to date with git history."""
    _install_deps(session)
    paths = [path for path in _tracked_files(session) if _NOTICE_FILE_PATTERN.fullmatch(path)]
    session.run("python", "-m", _PROJECT_NAME, *paths)


@nox.session(reuse_venv=True, venv_backend="uv")
def reformat(session: nox.Session) -> None:
    """Reformat this project's modules to fit the standard style."""
    _install_deps(session, "reformat")
    session.run("black", *_TOP_LEVEL_TARGETS)
    session.run("isort", *_TOP_LEVEL_TARGETS)
    session.run("pycln", *_TOP_LEVEL_TARGETS, "--config", "pyproject.toml")

    tracked_files = list(_tracked_files(session))
    py_files = [path for path in tracked_files if re.fullmatch(r".+\.pyi?$", path)]

    if py_files:
        session.log("Running sort-all")
        session.run("sort-all", *py_files, success_codes=[0, 1], log=False)

    session.log("Running pre_commit_hooks.end_of_file_fixer")
    session.run("python", "-m", "pre_commit_hooks.end_of_file_fixer", *tracked_files, success_codes=[0, 1], log=False)

    session.log("Running pre_commit_hooks.trailing_whitespace_fixer")
    session.run(
        "python", "-m", "pre_commit_hooks.trailing_whitespace_fixer", *tracked_files, success_codes=[0, 1], log=False
    )


@nox.session(reuse_venv=True, venv_backend="uv")
def test(session: nox.Session) -> None:
    """Run this project's tests using pytest."""
    _install_deps(session, "tests")
    session.run("pytest", "-n", "auto", "--import-mode", "importlib", *session.posargs)


@nox.session(name="test-coverage", reuse_venv=True, venv_backend="uv")
def test_coverage(session: nox.Session) -> None:
    """Run this project's tests while recording test coverage."""
    _install_deps(session, "tests")
    session.install("pytest-cov")
    session.run(
        "pytest",
        "-n",
        "auto",
        f"--cov={_PROJECT_NAME}",
        "--cov-report",
        "html:coverage_html",
        "--cov-report",
        "xml:coverage.xml",
    )


@nox.session(name="type-check", reuse_venv=True, venv_backend="uv")
def type_check(session: nox.Session) -> None:
    """Statically analyse and verify this project using Pyright and mypy."""
    _install_deps(session, "type-checking")
    session.run("python", "-m", "pyright", "--version")
    session.run("python", "-m", "pyright")
    session.run("python", "-m", "mypy", _PROJECT_NAME, "--show-error-codes")
