# SPDX-License-Identifier: Apache-2.0
# Licensed to the Ed-Fi Alliance under one or more agreements.
# The Ed-Fi Alliance licenses this file to you under the Apache License, Version 2.0.
# See the LICENSE and NOTICES files in the project root for more information.

import json
import logging
import sys

from oneroster.enrollment.main import get_enrollments_joined
from oneroster.helper.exceptions import OneRosterError
from oneroster.helper.session import Session


def main():
    log_format = (
        '[%(asctime)s] %(levelname)-8s %(name)-12s %(message)s')

    log_level = logging.INFO if sys.argv[-1] == 'debug' else logging.WARNING

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[
            logging.StreamHandler()
        ]
    )

    logger = logging.getLogger("oneroster")
    try:
        with Session.from_config() as session:
            session.login()
            enrollments = get_enrollments_joined(session)
    except OneRosterError as err:
        logger.error(f"Could not get joined enrollments: {err}")
        return 1

    json.dump([enrollment.to_dict() for enrollment in enrollments], sys.stdout, indent=4)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
