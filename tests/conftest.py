# SPDX-License-Identifier: Apache-2.0
# Licensed to the Ed-Fi Alliance under one or more agreements.
# The Ed-Fi Alliance licenses this file to you under the Apache License, Version 2.0.
# See the LICENSE and NOTICES files in the project root for more information.

import json

import pytest

from oneroster.helper.session import Session

API_URL = "https://sis.example.com"
DATA_URL = f"{API_URL}/ims/oneroster/v1p1"

_NO_JSON = object()


class FakeResponse:
    def __init__(self, status_code=200, json_data=_NO_JSON, headers=None, reason="OK", text=None):
        self.status_code = status_code
        self.reason = reason
        self.headers = headers or {}
        self._json_data = json_data
        if text is None:
            text = "" if json_data is _NO_JSON else json.dumps(json_data)
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._json_data is _NO_JSON:
            raise ValueError("No JSON object could be decoded")
        return self._json_data


class FakeHttp:
    """Stands in for requests.Session; answers from a routing function."""

    def __init__(self, responder=None):
        self.responder = responder
        self.calls = []
        self.closed = False

    def get(self, url, **kwargs):
        self.calls.append(("GET", url, kwargs))
        return self.responder("GET", url, kwargs)

    def post(self, url, **kwargs):
        self.calls.append(("POST", url, kwargs))
        return self.responder("POST", url, kwargs)

    def close(self):
        self.closed = True


def collection_responder(collections, page_total_header=False):
    """Serve ``{resource: records}`` with limit/offset paging."""

    def responder(method, url, kwargs):
        resource = url.rsplit("/", 1)[-1]
        records = collections[resource]
        params = kwargs.get("params", {})
        offset = params.get("offset", 0)
        limit = params.get("limit", len(records))
        headers = {"X-Total-Count": str(len(records))} if page_total_header else {}
        return FakeResponse(json_data={resource: records[offset:offset + limit]}, headers=headers)

    return responder


@pytest.fixture
def fake_http():
    return FakeHttp()


@pytest.fixture
def session(fake_http):
    return Session(
        api_url=API_URL,
        client_id="client",
        client_secret="secret",
        limit=2,
        token="token-123",
        http=fake_http,
    )


@pytest.fixture
def roster():
    return {
        "enrollments": [
            {
                "sourcedId": "E1",
                "status": "active",
                "dateLastModified": "2023-01-01T00:00:00Z",
                "role": "student",
                "user": {"sourcedId": "U1", "type": "user"},
                "class": {"sourcedId": "C1", "type": "class"},
                "school": {"sourcedId": "S1", "type": "org"},
            },
            {
                "sourcedId": "E2",
                "status": "active",
                "dateLastModified": "2023-01-02T00:00:00Z",
                "role": "teacher",
                "user": {"sourcedId": "U2", "type": "user"},
                "class": {"sourcedId": "C2", "type": "class"},
                "school": {"sourcedId": "S1", "type": "org"},
            },
            {
                "sourcedId": "E3",
                "status": "active",
                "dateLastModified": "2023-01-03T00:00:00Z",
                "role": "student",
                "user": {"sourcedId": "U3", "type": "user"},
                "class": {"sourcedId": "C1", "type": "class"},
                "school": {"sourcedId": "S1", "type": "org"},
            },
        ],
        "classes": [
            {
                "sourcedId": "C1",
                "status": "active",
                "dateLastModified": "2022-12-01T00:00:00Z",
                "title": "Algebra",
                "classCode": "ALG-1",
                "classType": "scheduled",
                "grades": ["09"],
                "subjects": ["Math"],
                "course": {"sourcedId": "CR1", "type": "course"},
                "school": {"sourcedId": "S1", "type": "org"},
                "terms": [{"sourcedId": "T1", "type": "academicSession"}],
            },
            {
                "sourcedId": "C2",
                "status": "active",
                "dateLastModified": "2022-12-02T00:00:00Z",
                "title": "Biology",
                "classCode": "BIO-1",
                "classType": "scheduled",
                "grades": ["10"],
                "subjects": ["Science"],
                "course": {"sourcedId": "CR2", "type": "course"},
                "school": {"sourcedId": "S1", "type": "org"},
                "terms": [{"sourcedId": "T1", "type": "academicSession"}],
            },
        ],
        "courses": [
            {
                "sourcedId": "CR1",
                "status": "active",
                "dateLastModified": "2022-11-01T00:00:00Z",
                "title": "Math 101",
                "courseCode": "MATH101",
                "subjects": ["Math"],
                "org": {"sourcedId": "D1", "type": "org"},
            },
            {
                "sourcedId": "CR2",
                "status": "active",
                "dateLastModified": "2022-11-02T00:00:00Z",
                "title": "Biology 101",
                "courseCode": "BIO101",
                "subjects": ["Science"],
                "org": {"sourcedId": "D1", "type": "org"},
            },
        ],
        "users": [
            {"sourcedId": "U1", "givenName": "Ada", "role": "student"},
            {"sourcedId": "U2", "givenName": "Grace", "role": "teacher"},
            {"sourcedId": "U3", "givenName": "Alan", "role": "student"},
        ],
    }
