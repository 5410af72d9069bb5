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
"""Errors and warnings raised or recorded while reconciling copyright notices."""

from __future__ import annotations

__all__ = [
    "ConfigError",
    "CopyrighterError",
    "EmptyOrganizationError",
    "EmptyYearSetError",
    "HistoryError",
    "MalformedYearsError",
    "NoHistoryWarning",
    "UndecodableFileError",
    "UnsupportedFileTypeError",
    "YearParseWarning",
]


class CopyrighterError(Exception):
    """Base class for all errors raised by Copyrighter."""


class ConfigError(CopyrighterError):
    """Raised when the project config couldn't be read or validated."""


class EmptyOrganizationError(CopyrighterError, ValueError):
    """Raised when no organization text was supplied.

    This is fatal for the whole invocation as no notice can be rendered.
    """

    def __init__(self) -> None:
        super().__init__("An organization is required to render copyright notices")


class EmptyYearSetError(CopyrighterError, ValueError):
    """Raised when asked to render a notice for an empty set of years."""

    def __init__(self) -> None:
        super().__init__("Cannot render a copyright notice with no years")


class MalformedYearsError(CopyrighterError, ValueError):
    """Raised when year text doesn't follow the `Y` / `Y1-Y2` token grammar.

    Attributes
    ----------
    text
        The full text which was being parsed.
    token
        The specific token which couldn't be parsed.
    """

    def __init__(self, text: str, token: str, /) -> None:
        super().__init__(f"Invalid year token {token!r} in {text!r}")
        self.text = text
        self.token = token


class UnsupportedFileTypeError(CopyrighterError):
    """Raised when no comment style is known for a file."""

    def __init__(self, name: str, /) -> None:
        super().__init__(f"No comment style is known for {name!r}")
        self.name = name


class HistoryError(CopyrighterError):
    """Raised when the revision history for a path couldn't be queried."""


class UndecodableFileError(CopyrighterError):
    """Raised when a file isn't valid UTF-8 text."""


class NoHistoryWarning(UserWarning):
    """Recorded when a file has no recoverable modification history."""


class YearParseWarning(UserWarning):
    """Recorded when an existing notice's years couldn't be parsed.

    The notice is still replaced, using only the years from history.
    """

    def __init__(self, error: MalformedYearsError, /) -> None:
        super().__init__(str(error))
        self.error = error
