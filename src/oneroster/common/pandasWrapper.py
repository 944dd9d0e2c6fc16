# SPDX-License-Identifier: Apache-2.0
# Licensed to the Ed-Fi Alliance under one or more agreements.
# The Ed-Fi Alliance licenses this file to you under the Apache License, Version 2.0.
# See the LICENSE and NOTICES files in the project root for more information.

from typing import Any, Callable, Optional, Union

import pandas as pd

KEY_COLUMN = '__join_key'
POSITION_COLUMN = '__right_position'

KeySelector = Union[str, Callable[[dict], Any]]


def pdMerge(left: pd.DataFrame, right: pd.DataFrame, how: str, leftOn: list, rightOn: list, suffixLeft='_x', suffixRight='_y') -> pd.DataFrame:
    return pd.merge(
        left,
        right,
        how=how,
        left_on=leftOn,
        right_on=rightOn,
        suffixes=(suffixLeft, suffixRight)
    )


def _key_function(key: KeySelector) -> Callable[[dict], Any]:
    if callable(key):
        return key
    return lambda record: record.get(key)


def _normalize_key(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float) and pd.isna(value):
        return None
    return str(value)


def get_column_names(records: list) -> list:
    columns = {}
    for record in records:
        for column in record:
            columns.setdefault(column, None)
    return list(columns)


def match_positions(left: list, right: list, leftOn: KeySelector, rightOn: KeySelector) -> list:
    """Position of the first right record matching each left record.

    Returns one entry per left record, in left order; ``None`` where no
    right record carries the same key. Null keys never match.
    """
    left_key = _key_function(leftOn)
    right_key = _key_function(rightOn)
    left_keys = pd.DataFrame({
        KEY_COLUMN: pd.Series([_normalize_key(left_key(record)) for record in left], dtype=object)
    })
    right_keys = pd.DataFrame({
        KEY_COLUMN: pd.Series([_normalize_key(right_key(record)) for record in right], dtype=object),
        POSITION_COLUMN: pd.Series(range(len(right)), dtype='int64'),
    })
    # pandas matches null keys to each other, and a repeated right key
    # would repeat left rows: keep only the first non-null occurrence.
    right_keys = right_keys.dropna(subset=[KEY_COLUMN]).drop_duplicates(subset=[KEY_COLUMN], keep='first')

    result_data_frame = pdMerge(
        left=left_keys,
        right=right_keys,
        how='left',
        leftOn=[KEY_COLUMN],
        rightOn=[KEY_COLUMN],
        suffixLeft=None,
        suffixRight=None
    )
    return [
        None if pd.isna(position) else int(position)
        for position in result_data_frame[POSITION_COLUMN].tolist()
    ]


def left_join(left: list, right: list, leftOn: KeySelector, rightOn: KeySelector, prefix: str) -> list:
    """Left join two collections of records.

    Every left record yields exactly one output record, in left order. The
    output holds the left record's fields unchanged plus every field name
    seen in ``right`` renamed to ``prefix + name``. The fields come from the
    first right record whose key equals the left key, and are ``None``
    when there is no such record. Neither input is modified.
    """
    right_columns = get_column_names(right)
    positions = match_positions(left, right, leftOn, rightOn)
    result = []
    for record, position in zip(left, positions):
        matched = right[position] if position is not None else {}
        joined = dict(record)
        for column in right_columns:
            joined.setdefault(f"{prefix}{column}", matched.get(column))
        result.append(joined)
    return result
