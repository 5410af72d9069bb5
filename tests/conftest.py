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
from __future__ import annotations

import os
import pathlib
import shutil
import subprocess

import pytest


class GitRepo:
    """Throwaway git repository with commits made at fixed dates."""

    __slots__ = ("root",)

    def __init__(self, root: pathlib.Path, /) -> None:
        self.root = root

    def git(self, *args: str, year: int = 2000) -> str:
        date = f"{year}-06-15T12:00:00+00:00"
        env = {
            **os.environ,
            "GIT_AUTHOR_DATE": date,
            "GIT_AUTHOR_EMAIL": "tester@example.com",
            "GIT_AUTHOR_NAME": "Tester",
            "GIT_COMMITTER_DATE": date,
            "GIT_COMMITTER_EMAIL": "tester@example.com",
            "GIT_COMMITTER_NAME": "Tester",
            "GIT_CONFIG_GLOBAL": os.devnull,
            "GIT_CONFIG_NOSYSTEM": "1",
        }
        output = subprocess.run(
            ["git", *args], capture_output=True, check=True, cwd=self.root, env=env, text=True, encoding="utf-8"
        )
        return output.stdout.strip()

    def write(self, name: str, content: str, /) -> pathlib.Path:
        path = self.root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8", newline="")
        return path

    def commit(self, year: int, files: dict[str, str], /) -> str:
        """Write and commit files, returning the new commit's SHA1."""
        for name, content in files.items():
            self.write(name, content)
            self.git("add", "--", name)

        self.git("commit", "-q", "-m", f"Changes from {year}", year=year)
        return self.git("rev-parse", "HEAD")


@pytest.fixture
def repo(tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> GitRepo:
    if shutil.which("git") is None:
        pytest.skip("Requires a git executable")

    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    root = tmp_path / "repo"
    root.mkdir()
    repo = GitRepo(root)
    repo.git("init", "-q")
    return repo
