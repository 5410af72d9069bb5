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

import pytest

from copyrighter import errors
from copyrighter import years


def test_merge() -> None:
    assert years.merge({2017, 2018, 2019}, {2019, 2020}) == {2017, 2018, 2019, 2020}


def test_merge_with_nothing() -> None:
    assert years.merge() == frozenset()
    assert years.merge(set(), set()) == frozenset()


def test_to_ranges() -> None:
    assert years.to_ranges({2022, 2018, 2020, 2019}) == [years.YearRange(2018, 2020), years.YearRange(2022, 2022)]


def test_to_ranges_when_empty() -> None:
    assert years.to_ranges(set()) == []


def test_year_range() -> None:
    assert str(years.YearRange(2019, 2021)) == "2019-2021"
    assert str(years.YearRange(2020, 2020)) == "2020"
    assert list(years.YearRange(2019, 2021)) == [2019, 2020, 2021]


def test_year_range_when_backwards() -> None:
    with pytest.raises(ValueError, match="after its end"):
        years.YearRange(2021, 2019)


def test_format_ranges() -> None:
    ranges = [years.YearRange(2022, 2022), years.YearRange(2018, 2020)]

    assert years.format_ranges(ranges) == "2018-2020, 2022"


def test_format_years_merges_adjacent_years() -> None:
    assert years.format_years({2019, 2020, 2021}) == "2019-2021"


def test_format_years_with_disjoint_islands() -> None:
    assert years.format_years({2018, 2020, 2021, 2023}) == "2018, 2020-2021, 2023"


def test_format_years_when_empty() -> None:
    assert years.format_years(set()) == ""


def test_parse_ranges_text() -> None:
    assert years.parse_ranges_text("2018-2020, 2022") == {2018, 2019, 2020, 2022}


def test_parse_ranges_text_is_tolerant_of_formatting() -> None:
    assert years.parse_ranges_text(" 2015 – 2017,2019 2021—2022 ") == {2015, 2016, 2017, 2019, 2021, 2022}


def test_parse_ranges_text_when_empty() -> None:
    assert years.parse_ranges_text("  ") == frozenset()


@pytest.mark.parametrize(
    ("text", "token"), [("2019-2017", "2019-2017"), ("2018, 20x9", "20x9"), ("0", "0"), ("2019-", "2019-")]
)
def test_parse_ranges_text_when_malformed(text: str, token: str) -> None:
    with pytest.raises(errors.MalformedYearsError) as exc_info:
        years.parse_ranges_text(text)

    assert exc_info.value.token == token
    assert exc_info.value.text == text


@pytest.mark.parametrize("token", ["20190", "1-999999999", "2019-20200", "9" * 5000])
def test_parse_ranges_text_when_year_too_wide(token: str) -> None:
    with pytest.raises(errors.MalformedYearsError) as exc_info:
        years.parse_ranges_text(f"2018, {token}")

    assert exc_info.value.token == token


@pytest.mark.parametrize("values", [{1999}, {2000, 2001, 2005}, set(range(1990, 2030, 3)), {2018, 2020, 2021, 2023}])
def test_ranges_text_round_trip(values: set[int]) -> None:
    assert years.parse_ranges_text(years.format_ranges(years.to_ranges(values))) == values
