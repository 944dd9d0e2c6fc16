# SPDX-License-Identifier: Apache-2.0
# Licensed to the Ed-Fi Alliance under one or more agreements.
# The Ed-Fi Alliance licenses this file to you under the Apache License, Version 2.0.
# See the LICENSE and NOTICES files in the project root for more information.

from typing import Annotated, Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer

# Each field is read as its OneRoster type when the feed matches it and is
# otherwise passed through unchanged: records are never rejected for shape.
Text = Annotated[Union[str, Any], Field(union_mode="left_to_right")]
Values = Annotated[Union[List[Any], Any], Field(union_mode="left_to_right")]


class Record(BaseModel):
    # Roster feeds carry vendor extensions; keep them instead of rejecting.
    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)

    def to_dict(self, exclude_none: bool = False) -> dict:
        return self.model_dump(by_alias=True, exclude_none=exclude_none)


class Reference(Record):
    sourcedId: Text = None
    href: Text = None
    type: Text = None

    # A reference serializes with only the members the feed supplied.
    @model_serializer(mode="wrap")
    def drop_empty_members(self, handler):
        return {key: value for key, value in handler(self).items() if value is not None}


ReferenceValue = Annotated[Union[Reference, Any], Field(union_mode="left_to_right")]
ReferenceValues = Annotated[Union[List[Reference], Any], Field(union_mode="left_to_right")]


def reference_id(reference: Any) -> Optional[Any]:
    return reference.sourcedId if isinstance(reference, Reference) else None


class Course(Record):
    sourcedId: Text = None
    status: Text = None
    dateLastModified: Text = None
    title: Text = None
    courseCode: Text = None
    grades: Values = None
    subjects: Values = None
    org: ReferenceValue = None


class Class(Record):
    sourcedId: Text = None
    status: Text = None
    dateLastModified: Text = None
    title: Text = None
    classCode: Text = None
    classType: Text = None
    location: Text = None
    grades: Values = None
    subjects: Values = None
    course: ReferenceValue = None
    school: ReferenceValue = None
    terms: ReferenceValues = None


class Enrollment(Record):
    sourcedId: Text = None
    status: Text = None
    dateLastModified: Text = None
    role: Text = None
    primary: Optional[Any] = None
    beginDate: Text = None
    endDate: Text = None
    user: ReferenceValue = None
    class_: ReferenceValue = Field(default=None, alias="class")
    school: ReferenceValue = None


class UserReference(Record):
    sourcedId: Text = None


class JoinedCourse(Record):
    sourcedId: Text = None
    code: Text = None
    dateLastModified: Text = None
    org: ReferenceValue = None
    status: Text = None
    subjects: Values = None
    title: Text = None


class JoinedClass(Record):
    sourcedId: Text = None
    code: Text = None
    type: Text = None
    dateLastModified: Text = None
    grades: Values = None
    school: ReferenceValue = None
    status: Text = None
    subjects: Values = None
    terms: ReferenceValues = None
    title: Text = None
    course: JoinedCourse = Field(default_factory=JoinedCourse)


class JoinedEnrollment(Record):
    """An enrollment with its class, and the class's course, embedded."""

    sourcedId: Text = None
    dateLastModified: Text = None
    role: Text = None
    school: ReferenceValue = None
    status: Text = None
    user: UserReference = Field(default_factory=UserReference)
    class_: JoinedClass = Field(default_factory=JoinedClass, alias="class")
