# SPDX-License-Identifier: Apache-2.0
# Licensed to the Ed-Fi Alliance under one or more agreements.
# The Ed-Fi Alliance licenses this file to you under the Apache License, Version 2.0.
# See the LICENSE and NOTICES files in the project root for more information.

from dagster import job, mem_io_manager

from oneroster.dagster_config.ops.api import (
    get_enrollments_joined_op,
    log_enrollments_summary,
)


# Outputs stay in memory: roster data is never written to disk.
@job(resource_defs={"io_manager": mem_io_manager})
def enrollments_job():
    log_enrollments_summary(get_enrollments_joined_op())
