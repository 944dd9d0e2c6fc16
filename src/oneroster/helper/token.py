# SPDX-License-Identifier: Apache-2.0
# Licensed to the Ed-Fi Alliance under one or more agreements.
# The Ed-Fi Alliance licenses this file to you under the Apache License, Version 2.0.
# See the LICENSE and NOTICES files in the project root for more information.

import base64

import requests
from dagster import get_dagster_logger

from oneroster.helper.exceptions import AuthenticationError, TransportError


# Exchange the client credentials for a bearer token
def get_token(session) -> str:
    logger = get_dagster_logger()
    if not session.client_id or not session.client_secret:
        raise AuthenticationError("Client id and client secret are required to log in.")

    credential = ":".join((session.client_id, session.client_secret))
    credential_encoded = base64.b64encode(credential.encode("utf-8"))
    access_headers = {"Authorization": b"Basic " + credential_encoded}
    access_params = {"grant_type": "client_credentials"}

    try:
        response = session.http.post(
            session.token_url,
            headers=access_headers,
            data=access_params,
            verify=session.verify_cert,
            timeout=session.timeout
        )
    except requests.RequestException as err:
        logger.error(f"Token request to {session.token_url} failed: {err}")
        raise TransportError(f"Token request to {session.token_url} failed: {err}") from err

    if response.status_code != 200:
        logger.error(f"Token Response: {response.status_code} - {response.reason}.")
        raise AuthenticationError(
            f"Token request rejected: {response.status_code} - {response.reason}",
            status_code=response.status_code
        )

    try:
        response_data = response.json()
    except ValueError:
        response_data = {}
    token = response_data.get("access_token") if isinstance(response_data, dict) else None
    if not token:
        raise AuthenticationError("Token response did not contain an access_token.", status_code=response.status_code)
    return token
