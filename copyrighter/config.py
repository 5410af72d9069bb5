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
"""Project level configuration for Copyrighter."""

from __future__ import annotations

__all__ = ["Config"]

import pathlib
import re
import tomllib
import typing

import pydantic

from . import engine
from . import errors
from . import parser
from . import styles

if typing.TYPE_CHECKING:
    from collections import abc as collections
    from typing import Self


class Config(pydantic.BaseModel):
    """Configuration class for the project config.

    This is read from the `[tool.copyrighter]` table of a `pyproject.toml`
    or from the top level of a `copyrighter.toml`.
    """

    model_config = pydantic.ConfigDict(extra="forbid", frozen=True)

    extensions: dict[str, styles.CommentStyle] = pydantic.Field(default_factory=dict)
    """File suffix (e.g. `".inc"`) or exact file name to comment style overrides."""

    fallback_style: styles.CommentStyle | None = styles.CommentStyle.HASH
    """Comment style for unrecognised files, `"none"` to error on them instead."""

    ignore_commits: list[str] = pydantic.Field(default_factory=list)
    jobs: pydantic.PositiveInt | None = None
    mark: str | None = None
    max_header_lines: pydantic.PositiveInt = parser.DEFAULT_MAX_LINES
    organization: str | None = None
    path_ignore: re.Pattern[str] | None = None
    rights_reserved: bool = True
    trim_to_first_commit: bool = False

    @pydantic.field_validator("fallback_style", mode="before")
    @classmethod
    def _validate_fallback_style(cls, value: typing.Any) -> typing.Any:  # noqa: ANN401
        if isinstance(value, str) and value.lower() == "none":
            return None

        return value

    def assert_organization(self) -> str:
        if not self.organization or not self.organization.strip():
            raise errors.EmptyOrganizationError

        return self.organization

    def options(self, *, first_commit_year: int | None = None) -> engine.Options:
        """Build the reconciliation options described by this config.

        Parameters
        ----------
        first_commit_year
            Year of the repository's first commit, when existing notices
            should be trimmed to it.
        """
        return engine.Options(
            first_commit_year=first_commit_year,
            mark=self.mark,
            max_lines=self.max_header_lines,
            rights_reserved=self.rights_reserved,
        )

    def filter_paths(self, paths: collections.Iterable[pathlib.Path], /) -> list[pathlib.Path]:
        """Remove the paths matched by `path_ignore`."""
        if self.path_ignore is None:
            return list(paths)

        pattern = self.path_ignore
        return [path for path in paths if not pattern.search(path.as_posix())]

    @classmethod
    def read(cls, base_path: pathlib.Path, /) -> Self:
        """Read the config from a directory, falling back to the defaults if none is found.

        Raises
        ------
        copyrighter.errors.ConfigError
            If the config file couldn't be parsed or is invalid.
        """
        for file_name, extractor in _TOML_PARSER.items():
            path = base_path / file_name
            if not path.exists():
                continue

            try:
                with path.open("rb") as file:
                    data = extractor(tomllib.load(file))

            except KeyError:
                continue

            except tomllib.TOMLDecodeError as exc:
                error_message = f"Couldn't parse {str(path)!r}: {exc}"
                raise errors.ConfigError(error_message) from exc

            try:
                return cls.model_validate(data)

            except pydantic.ValidationError as exc:
                error_message = f"Invalid config in {str(path)!r}:\n{exc}"
                raise errors.ConfigError(error_message) from exc

        return cls()

    @classmethod
    async def read_async(cls, base_path: pathlib.Path, /) -> Self:
        import anyio.to_thread  # noqa: PLC0415  # `import` should be at the top-level of a file

        return await anyio.to_thread.run_sync(cls.read, base_path)


_TOML_PARSER: dict[str, collections.Callable[[dict[str, typing.Any]], dict[str, typing.Any]]] = {
    "pyproject.toml": lambda data: data["tool"]["copyrighter"],
    "copyrighter.toml": lambda data: data,
}
