# SPDX-License-Identifier: Apache-2.0
# Licensed to the Ed-Fi Alliance under one or more agreements.
# The Ed-Fi Alliance licenses this file to you under the Apache License, Version 2.0.
# See the LICENSE and NOTICES files in the project root for more information.

import json
from typing import Optional

import pandas as pd
from dagster import file_relative_path

from oneroster.helper.exceptions import ConfigurationError

AGE_COLUMN = 'age'


# Grade levels of each schooling system, one row per typical starting age.
def get_grade_map() -> pd.DataFrame:
    with open(file_relative_path(__file__, './grade_map/grade_map.json'), "r") as file:
        data = json.load(file)
    return pd.DataFrame(data)


def get_grade_systems() -> list:
    return [column for column in get_grade_map().columns if column != AGE_COLUMN]


def convert_grade(value: str, from_system: str, to_system: str) -> Optional[str]:
    grade_map = get_grade_map()
    for system in (from_system, to_system):
        if system not in grade_map.columns or system == AGE_COLUMN:
            raise ConfigurationError(f"Unknown grade system '{system}'. Supported systems: {get_grade_systems()}")
    if value is None:
        return None
    source = grade_map[from_system].astype(str).str.strip().str.lower()
    matches = grade_map[source == str(value).strip().lower()]
    if matches.empty:
        return None
    converted = matches[to_system].iloc[0]
    return None if pd.isna(converted) else converted
