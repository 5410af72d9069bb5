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
"""The comment syntaxes Copyrighter knows how to read and write."""

from __future__ import annotations

__all__ = ["CommentStyle", "Delimiters", "style_for_path"]

import dataclasses
import enum
import pathlib
import typing

from . import errors

if typing.TYPE_CHECKING:
    from collections import abc as collections


@dataclasses.dataclass(frozen=True, slots=True)
class Delimiters:
    """The literal text wrapped around a notice on its line.

    For parsed notices this is exactly what was found on disk (indentation
    included), e.g. `" * "` inside a block comment or `"/* "` and `" */"`.
    """

    prefix: str
    suffix: str = ""


class CommentStyle(enum.Enum):
    """Closed set of comment syntaxes, named after a representative language."""

    C = "c"
    """`//` line comments and `/* */` blocks."""

    CSS = "css"
    """`/* */` blocks only."""

    HASH = "hash"
    """`#` line comments."""

    DASH = "dash"
    """`--` line comments."""

    LISP = "lisp"
    """`;` line comments."""

    MARKUP = "markup"
    """`<!-- -->` blocks only."""

    @property
    def line(self) -> str | None:
        """Token which opens a line comment, if this style has them."""
        return _LINE_TOKENS.get(self)

    @property
    def block(self) -> tuple[str, str] | None:
        """Pair of tokens which open and close a block comment, if this style has them."""
        return _BLOCK_TOKENS.get(self)

    def delimiters(self) -> Delimiters:
        """Delimiters used for a new notice in this style.

        Line comments are preferred over blocks where the style has both.
        """
        if self.line:
            return Delimiters(f"{self.line} ")

        assert self.block is not None
        opener, closer = self.block
        return Delimiters(f"{opener} ", f" {closer}")


_LINE_TOKENS: dict[CommentStyle, str] = {
    CommentStyle.C: "//",
    CommentStyle.HASH: "#",
    CommentStyle.DASH: "--",
    CommentStyle.LISP: ";",
}
_BLOCK_TOKENS: dict[CommentStyle, tuple[str, str]] = {
    CommentStyle.C: ("/*", "*/"),
    CommentStyle.CSS: ("/*", "*/"),
    CommentStyle.MARKUP: ("<!--", "-->"),
}

_SUFFIXES: dict[str, CommentStyle] = {
    **dict.fromkeys(
        (
            ".c", ".cc", ".cpp", ".cs", ".cxx", ".d", ".dart", ".go", ".h", ".hh", ".hpp", ".hxx", ".java",
            ".js", ".jsx", ".kt", ".kts", ".m", ".mjs", ".mm", ".php", ".proto", ".rs", ".scala", ".scss",
            ".swift", ".ts", ".tsx", ".zig",
        ),
        CommentStyle.C,
    ),
    ".css": CommentStyle.CSS,
    **dict.fromkeys(
        (
            ".bash", ".bzl", ".cfg", ".cmake", ".coffee", ".jl", ".mk", ".nim", ".nix", ".pl", ".pm", ".ps1",
            ".py", ".pyi", ".pyx", ".r", ".rb", ".sh", ".tcl", ".tf", ".toml", ".yaml", ".yml", ".zsh",
        ),
        CommentStyle.HASH,
    ),
    **dict.fromkeys((".ada", ".adb", ".ads", ".elm", ".hs", ".lua", ".sql", ".vhd", ".vhdl"), CommentStyle.DASH),
    **dict.fromkeys((".asm", ".clj", ".cljs", ".el", ".ini", ".lisp", ".rkt", ".s", ".scm"), CommentStyle.LISP),
    **dict.fromkeys((".htm", ".html", ".svg", ".vue", ".xml", ".xsd", ".xsl"), CommentStyle.MARKUP),
}
_NAMES: dict[str, CommentStyle] = {
    "CMakeLists.txt": CommentStyle.HASH,
    "Dockerfile": CommentStyle.HASH,
    "Gemfile": CommentStyle.HASH,
    "Makefile": CommentStyle.HASH,
    "Rakefile": CommentStyle.HASH,
    "justfile": CommentStyle.HASH,
}


def style_for_path(
    path: pathlib.Path | str,
    /,
    *,
    overrides: collections.Mapping[str, CommentStyle] | None = None,
    fallback: CommentStyle | None = CommentStyle.HASH,
) -> CommentStyle:
    """Pick the comment style for a file based on its name.

    Parameters
    ----------
    path
        Path of the file.
    overrides
        Mapping of file suffixes (e.g. `".inc"`) or exact file names to styles
        which take priority over the built-in table.
    fallback
        Style to use for unrecognised files.

        If this is [None][] then unrecognised files raise an error.

    Raises
    ------
    copyrighter.errors.UnsupportedFileTypeError
        If the file wasn't recognised and no fallback was passed.
    """
    path = pathlib.Path(path)
    suffix = path.suffix.lower()

    if overrides:
        if style := overrides.get(path.name) or overrides.get(suffix):
            return style

    if style := _NAMES.get(path.name) or _SUFFIXES.get(suffix):
        return style

    if fallback is None:
        raise errors.UnsupportedFileTypeError(path.name)

    return fallback
