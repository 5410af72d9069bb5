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

import functools
import pathlib

import anyio
import pytest

from copyrighter import config
from copyrighter import errors
from copyrighter import styles


def test_read_from_pyproject(tmp_path: pathlib.Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
[project]
name = "example"

[tool.copyrighter]
organization = "Acme Corp"
ignore_commits = ["abc123"]
jobs = 4
mark = "©"
max_header_lines = 10
rights_reserved = false
trim_to_first_commit = true
fallback_style = "none"
path_ignore = "^vendor/"

[tool.copyrighter.extensions]
".inc" = "c"
"BUILD" = "hash"
"""
    )

    result = config.Config.read(tmp_path)

    assert result.organization == "Acme Corp"
    assert result.ignore_commits == ["abc123"]
    assert result.jobs == 4
    assert result.mark == "©"
    assert result.max_header_lines == 10
    assert result.rights_reserved is False
    assert result.trim_to_first_commit is True
    assert result.fallback_style is None
    assert result.extensions == {".inc": styles.CommentStyle.C, "BUILD": styles.CommentStyle.HASH}
    assert result.path_ignore is not None
    assert result.path_ignore.pattern == "^vendor/"


def test_read_from_copyrighter_toml(tmp_path: pathlib.Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "example"\n')
    (tmp_path / "copyrighter.toml").write_text('organization = "Acme Corp"\nfallback_style = "dash"\n')

    result = config.Config.read(tmp_path)

    assert result.organization == "Acme Corp"
    assert result.fallback_style is styles.CommentStyle.DASH


def test_read_defaults(tmp_path: pathlib.Path) -> None:
    result = config.Config.read(tmp_path)

    assert result == config.Config()
    assert result.organization is None
    assert result.fallback_style is styles.CommentStyle.HASH
    assert result.rights_reserved is True


def test_read_async(tmp_path: pathlib.Path) -> None:
    (tmp_path / "copyrighter.toml").write_text('organization = "Acme Corp"\n')

    result = anyio.run(functools.partial(config.Config.read_async, tmp_path))

    assert result.organization == "Acme Corp"


@pytest.mark.parametrize("content", ["jobs = 0\n", 'unknown_key = "value"\n', 'fallback_style = "cobol"\n'])
def test_read_when_invalid(tmp_path: pathlib.Path, content: str) -> None:
    (tmp_path / "copyrighter.toml").write_text(content)

    with pytest.raises(errors.ConfigError, match="Invalid config"):
        config.Config.read(tmp_path)


def test_read_when_not_toml(tmp_path: pathlib.Path) -> None:
    (tmp_path / "copyrighter.toml").write_text("organization = \n")

    with pytest.raises(errors.ConfigError, match="Couldn't parse"):
        config.Config.read(tmp_path)


def test_assert_organization() -> None:
    assert config.Config(organization="Acme").assert_organization() == "Acme"

    with pytest.raises(errors.EmptyOrganizationError):
        config.Config().assert_organization()

    with pytest.raises(errors.EmptyOrganizationError):
        config.Config(organization="  ").assert_organization()


def test_options() -> None:
    result = config.Config(mark="(c)", max_header_lines=5, rights_reserved=False).options(first_commit_year=2012)

    assert result.first_commit_year == 2012
    assert result.mark == "(c)"
    assert result.max_lines == 5
    assert result.rights_reserved is False


def test_filter_paths() -> None:
    paths = [pathlib.Path("vendor/lib.c"), pathlib.Path("src/main.c")]

    assert config.Config(path_ignore="^vendor/").filter_paths(paths) == [pathlib.Path("src/main.c")]
    assert config.Config().filter_paths(paths) == paths
