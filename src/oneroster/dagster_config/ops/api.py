# SPDX-License-Identifier: Apache-2.0
# Licensed to the Ed-Fi Alliance under one or more agreements.
# The Ed-Fi Alliance licenses this file to you under the Apache License, Version 2.0.
# See the LICENSE and NOTICES files in the project root for more information.

from collections import Counter

from dagster import get_dagster_logger, op

from oneroster.enrollment.main import get_enrollments_joined
from oneroster.helper.session import Session


@op
def get_enrollments_joined_op() -> list:
    with Session.from_config() as session:
        session.login()
        return [enrollment.to_dict() for enrollment in get_enrollments_joined(session)]


@op
def log_enrollments_summary(enrollments: list) -> dict:
    logger = get_dagster_logger()
    roles = Counter(enrollment.get("role") or "unknown" for enrollment in enrollments)
    for role, total in sorted(roles.items()):
        logger.info(f"{role}: {total} enrollments")
    return dict(roles)
