# SPDX-License-Identifier: Apache-2.0
# Licensed to the Ed-Fi Alliance under one or more agreements.
# The Ed-Fi Alliance licenses this file to you under the Apache License, Version 2.0.
# See the LICENSE and NOTICES files in the project root for more information.

import pytest

from oneroster.grades.main import convert_grade, get_grade_map, get_grade_systems
from oneroster.helper.exceptions import ConfigurationError


def test_grade_map_systems():
    assert get_grade_systems() == ["us", "england", "scotland", "australia", "new_zealand"]
    assert len(get_grade_map().index) == 15


@pytest.mark.parametrize("value, from_system, to_system, expected", [
    ("KG", "us", "england", "Year 1"),
    ("09", "us", "scotland", "S3"),
    ("12", "us", "australia", "Year 12"),
    ("Year 7", "england", "us", "06"),
    ("p1", "scotland", "new_zealand", "Year 1"),
    ("Foundation", "australia", "us", "KG"),
])
def test_convert_grade(value, from_system, to_system, expected):
    assert convert_grade(value, from_system, to_system) == expected


def test_convert_grade_without_equivalent():
    assert convert_grade("PK", "us", "new_zealand") is None
    assert convert_grade("Year 14", "england", "us") is None
    assert convert_grade(None, "us", "england") is None


def test_convert_grade_unknown_system():
    with pytest.raises(ConfigurationError):
        convert_grade("01", "us", "france")
    with pytest.raises(ConfigurationError):
        convert_grade("01", "age", "us")
