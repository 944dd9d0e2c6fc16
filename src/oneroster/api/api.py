# SPDX-License-Identifier: Apache-2.0
# Licensed to the Ed-Fi Alliance under one or more agreements.
# The Ed-Fi Alliance licenses this file to you under the Apache License, Version 2.0.
# See the LICENSE and NOTICES files in the project root for more information.

from typing import Any, Optional

import requests
from dagster import get_dagster_logger

from oneroster.helper.exceptions import (
    AuthenticationError,
    HttpError,
    TransportError,
)
from oneroster.helper.helper import (
    COLLECTION_KEY,
    RECORD_KEY,
    get_headers,
    get_resource,
    get_url,
)
from oneroster.helper.session import Session

TOTAL_COUNT_HEADER = "X-Total-Count"


def _query_parameters(filter: Optional[str], sort: Optional[str], order_by: Optional[str], fields: Optional[Any]) -> dict:
    parameters = {}
    if filter:
        parameters["filter"] = filter
    if sort:
        parameters["sort"] = sort
    if order_by:
        parameters["orderBy"] = order_by
    if fields:
        parameters["fields"] = fields if isinstance(fields, str) else ",".join(fields)
    return parameters


def _get(session: Session, url: str, parameters: dict) -> requests.Response:
    logger = get_dagster_logger()
    headers = get_headers(session.require_token())
    try:
        response = session.http.get(
            url,
            headers=headers,
            params=parameters,
            verify=session.verify_cert,
            timeout=session.timeout
        )
    except requests.RequestException as err:
        logger.error(f"Request to {url} failed: {err}")
        raise TransportError(f"Request to {url} failed: {err}") from err

    if response.status_code == 401:
        logger.error(f"Get API Data Response: {response.status_code} - {response.reason}.")
        raise AuthenticationError(f"Session token rejected by {url}", status_code=response.status_code)
    if not response.ok:
        logger.error(f"Get API Data Response: {response.status_code} - {response.reason}.")
        raise HttpError(
            f"Request to {url} returned {response.reason}",
            status_code=response.status_code,
            body=response.text,
            url=url
        )
    return response


def _unwrap(response: requests.Response, key: str, url: str) -> Any:
    try:
        response_data = response.json()
    except ValueError as err:
        raise HttpError(
            f"Response from {url} is not JSON",
            status_code=response.status_code,
            body=response.text,
            url=url
        ) from err
    if isinstance(response_data, dict) and key in response_data:
        return response_data[key]
    raise HttpError(
        f"Response from {url} has no '{key}' member",
        status_code=response.status_code,
        body=response.text,
        url=url
    )


def _total_count(response: requests.Response) -> Optional[int]:
    total = response.headers.get(TOTAL_COUNT_HEADER)
    try:
        return int(total) if total is not None else None
    except ValueError:
        return None


def _first_sourced_id(page: list) -> Optional[Any]:
    if page and isinstance(page[0], dict):
        return page[0].get("sourcedId")
    return None


# Get every page of a resource from the OneRoster API
def get_all(
    session: Session,
    resource: str,
    filter: Optional[str] = None,
    sort: Optional[str] = None,
    order_by: Optional[str] = None,
    fields: Optional[Any] = None,
) -> list:
    logger = get_dagster_logger()
    endpoint = get_resource(resource)
    session.require_token()
    url = get_url(session.api_url, session.data_path, resource)
    query = _query_parameters(filter, sort, order_by, fields)
    offset = 0
    previous_first_id = None
    result: list[Any]
    result = []
    while True:
        parameters = {"limit": session.limit, "offset": offset, **query}
        response = _get(session, url, parameters)
        page = _unwrap(response, endpoint[COLLECTION_KEY], url)
        if not isinstance(page, list):
            raise HttpError(
                f"Response from {url} has a non-list '{endpoint[COLLECTION_KEY]}' member",
                status_code=response.status_code,
                body=response.text,
                url=url
            )
        logger.debug(f"{resource}: offset {offset} returned {len(page)} records")
        first_id = _first_sourced_id(page)
        if first_id is not None and first_id == previous_first_id:
            logger.warning(f"{resource}: offset {offset} repeated the previous page, server ignores offset")
            break
        previous_first_id = first_id
        result.extend(page)
        offset += len(page)
        total = _total_count(response)
        if not page:
            # retrieved all data from api
            break
        if total is not None and offset >= total:
            break
    logger.info(f"Fetched {len(result)} {resource}")
    return result


# Get a single record by sourcedId
def get_one(session: Session, resource: str, sourced_id: str) -> dict:
    endpoint = get_resource(resource)
    session.require_token()
    url = get_url(session.api_url, session.data_path, resource, sourced_id)
    response = _get(session, url, {})
    return _unwrap(response, endpoint[RECORD_KEY], url)


def get_users(session: Session, **parameters) -> list:
    return get_all(session, "users", **parameters)


def get_classes(session: Session, **parameters) -> list:
    return get_all(session, "classes", **parameters)


def get_courses(session: Session, **parameters) -> list:
    return get_all(session, "courses", **parameters)


def get_enrollments(session: Session, **parameters) -> list:
    return get_all(session, "enrollments", **parameters)


def get_user(session: Session, sourced_id: str) -> dict:
    return get_one(session, "users", sourced_id)


def get_class(session: Session, sourced_id: str) -> dict:
    return get_one(session, "classes", sourced_id)


def get_course(session: Session, sourced_id: str) -> dict:
    return get_one(session, "courses", sourced_id)


def get_enrollment(session: Session, sourced_id: str) -> dict:
    return get_one(session, "enrollments", sourced_id)
