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
"""Render canonical copyright notices."""

from __future__ import annotations

__all__ = ["RIGHTS_RESERVED", "render_notice"]

import typing

from . import errors
from . import years as years_

if typing.TYPE_CHECKING:
    from collections import abc as collections

    from . import styles

RIGHTS_RESERVED = "All rights reserved."


def render_notice(
    organization: str,
    years: collections.Iterable[int],
    delimiters: styles.Delimiters,
    /,
    *,
    mark: str = "",
    rights_reserved: bool = True,
) -> str:
    """Render a single line copyright notice.

    Parameters
    ----------
    organization
        The organization holding the copyright.
    years
        The years to list.
    delimiters
        Comment tokens to wrap the notice in.
    mark
        Copyright symbol to place before the years (e.g. `"©"`).
    rights_reserved
        Whether to end the notice with "All rights reserved.".

        This is skipped if the organization text already says it.

    Returns
    -------
    str
        The notice, e.g. `"// Copyright 2018-2020, 2022 Acme Corp. All rights reserved."`.

    Raises
    ------
    copyrighter.errors.EmptyOrganizationError
        If the organization is blank.
    copyrighter.errors.EmptyYearSetError
        If no years were passed.
    """
    organization = organization.strip()
    if not organization:
        raise errors.EmptyOrganizationError

    years_text = years_.format_years(years)
    if not years_text:
        raise errors.EmptyYearSetError

    body = f"Copyright {mark} {years_text} {organization}" if mark else f"Copyright {years_text} {organization}"
    if rights_reserved and RIGHTS_RESERVED.casefold() not in organization.casefold():
        body = f"{body} {RIGHTS_RESERVED}" if body.endswith(".") else f"{body}. {RIGHTS_RESERVED}"

    return f"{delimiters.prefix}{body}{delimiters.suffix}"
