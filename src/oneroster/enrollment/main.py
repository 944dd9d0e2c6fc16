# SPDX-License-Identifier: Apache-2.0
# Licensed to the Ed-Fi Alliance under one or more agreements.
# The Ed-Fi Alliance licenses this file to you under the Apache License, Version 2.0.
# See the LICENSE and NOTICES files in the project root for more information.

from dagster import get_dagster_logger

from oneroster.api.api import get_classes, get_courses, get_enrollments
from oneroster.common.pandasWrapper import left_join
from oneroster.helper.records import (
    Class,
    Course,
    Enrollment,
    JoinedClass,
    JoinedCourse,
    JoinedEnrollment,
    UserReference,
    reference_id,
)
from oneroster.helper.session import Session

CLASS_PREFIX = 'class_'
COURSE_PREFIX = 'course_'
USER_SOURCED_ID = 'userSourcedId'
CLASS_SOURCED_ID = 'classSourcedId'
COURSE_SOURCED_ID = 'courseSourcedId'


def _enrollment_rows(enrollments: list) -> list:
    rows = []
    for content in enrollments:
        enrollment = Enrollment.model_validate(content)
        row = enrollment.to_dict()
        row[USER_SOURCED_ID] = reference_id(enrollment.user)
        row[CLASS_SOURCED_ID] = reference_id(enrollment.class_)
        rows.append(row)
    return rows


def _class_rows(classes: list) -> list:
    rows = []
    for content in classes:
        class_ = Class.model_validate(content)
        row = class_.to_dict()
        row[COURSE_SOURCED_ID] = reference_id(class_.course)
        rows.append(row)
    return rows


def _course_rows(courses: list) -> list:
    return [Course.model_validate(content).to_dict() for content in courses]


def _joined_enrollment(row: dict) -> JoinedEnrollment:
    course_prefix = f"{CLASS_PREFIX}{COURSE_PREFIX}"
    course = JoinedCourse(
        sourcedId=row.get(f"{course_prefix}sourcedId"),
        code=row.get(f"{course_prefix}courseCode"),
        dateLastModified=row.get(f"{course_prefix}dateLastModified"),
        org=row.get(f"{course_prefix}org"),
        status=row.get(f"{course_prefix}status"),
        subjects=row.get(f"{course_prefix}subjects"),
        title=row.get(f"{course_prefix}title"),
    )
    class_ = JoinedClass(
        sourcedId=row.get(CLASS_SOURCED_ID),
        code=row.get(f"{CLASS_PREFIX}classCode"),
        type=row.get(f"{CLASS_PREFIX}classType"),
        dateLastModified=row.get(f"{CLASS_PREFIX}dateLastModified"),
        grades=row.get(f"{CLASS_PREFIX}grades"),
        school=row.get(f"{CLASS_PREFIX}school"),
        status=row.get(f"{CLASS_PREFIX}status"),
        subjects=row.get(f"{CLASS_PREFIX}subjects"),
        terms=row.get(f"{CLASS_PREFIX}terms"),
        title=row.get(f"{CLASS_PREFIX}title"),
        course=course,
    )
    return JoinedEnrollment(
        sourcedId=row.get('sourcedId'),
        dateLastModified=row.get('dateLastModified'),
        role=row.get('role'),
        school=row.get('school'),
        status=row.get('status'),
        user=UserReference(sourcedId=row.get(USER_SOURCED_ID)),
        class_=class_,
    )


def assemble_enrollments(enrollments: list, classes: list, courses: list) -> list[JoinedEnrollment]:
    """Embed each enrollment's class, and that class's course, in the enrollment.

    Takes the raw enrollment, class and course records as returned by the
    API. References that do not resolve leave the embedded fields empty;
    the enrollment itself is always kept.
    """
    enrollment_rows = _enrollment_rows(enrollments)
    class_rows = _class_rows(classes)
    course_rows = _course_rows(courses)

    ############################
    # Join Class and Course
    ############################
    class_course_rows = left_join(
        left=class_rows,
        right=course_rows,
        leftOn=COURSE_SOURCED_ID,
        rightOn='sourcedId',
        prefix=COURSE_PREFIX
    )
    ############################
    # Join Enrollment and Class
    ############################
    result_rows = left_join(
        left=enrollment_rows,
        right=class_course_rows,
        leftOn=CLASS_SOURCED_ID,
        rightOn='sourcedId',
        prefix=CLASS_PREFIX
    )
    return [_joined_enrollment(row) for row in result_rows]


def get_enrollments_joined(session: Session) -> list[JoinedEnrollment]:
    logger = get_dagster_logger()
    session.require_token()
    enrollments_content = get_enrollments(session)
    classes_content = get_classes(session)
    courses_content = get_courses(session)
    result = assemble_enrollments(enrollments_content, classes_content, courses_content)
    logger.info(
        f"Joined {len(result)} enrollments with {len(classes_content)} classes and {len(courses_content)} courses"
    )
    return result
