# SPDX-License-Identifier: Apache-2.0
# Licensed to the Ed-Fi Alliance under one or more agreements.
# The Ed-Fi Alliance licenses this file to you under the Apache License, Version 2.0.
# See the LICENSE and NOTICES files in the project root for more information.

from typing import Optional

import requests
from dagster import get_dagster_logger
from decouple import config

from oneroster.helper.exceptions import AuthenticationError, ConfigurationError
from oneroster.helper.helper import DATA_PATH, TOKEN_PATH, get_provider
from oneroster.helper.token import get_token

DEFAULT_PROVIDER = "v1p1"
DEFAULT_LIMIT = 500
DEFAULT_TIMEOUT = 60


class Session:
    """Connection state for one OneRoster API.

    Holds the API location, the client credentials and, once ``login`` has
    been called, the bearer token every request is sent with. A session is
    created once and passed to the fetch and assembly functions.
    """

    def __init__(
        self,
        api_url: str,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        provider: str = DEFAULT_PROVIDER,
        token_path: Optional[str] = None,
        data_path: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        verify_cert: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
        token: Optional[str] = None,
        http: Optional[requests.Session] = None,
    ):
        if not api_url:
            raise ConfigurationError("The OneRoster API url is required.")
        if limit <= 0:
            raise ConfigurationError(f"Page size must be positive, got {limit}.")
        provider_paths = get_provider(provider)
        self.api_url = api_url.rstrip("/")
        self.client_id = client_id
        self.client_secret = client_secret
        self.provider = provider
        self.token_path = (token_path or provider_paths[TOKEN_PATH]).strip("/")
        self.data_path = (data_path or provider_paths[DATA_PATH]).strip("/")
        self.limit = limit
        self.verify_cert = verify_cert
        self.timeout = timeout
        self.token = token
        self.http = http if http is not None else requests.Session()

    @classmethod
    def from_config(cls, http: Optional[requests.Session] = None) -> "Session":
        return cls(
            api_url=config("ONEROSTER_API_URL", default=""),
            client_id=config("ONEROSTER_CLIENT_ID", default=None),
            client_secret=config("ONEROSTER_CLIENT_SECRET", default=None),
            provider=config("ONEROSTER_PROVIDER", default=DEFAULT_PROVIDER),
            token_path=config("ONEROSTER_TOKEN_PATH", default=None),
            data_path=config("ONEROSTER_DATA_PATH", default=None),
            limit=config("API_LIMIT", default=DEFAULT_LIMIT, cast=int),
            verify_cert=config("REQUESTS_CERT_VERIFICATION", default=True, cast=bool),
            timeout=config("REQUESTS_TIMEOUT", default=DEFAULT_TIMEOUT, cast=float),
            http=http,
        )

    @property
    def token_url(self) -> str:
        return f"{self.api_url}/{self.token_path}"

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def login(self) -> str:
        self.token = get_token(self)
        get_dagster_logger().info(f"Logged in to {self.api_url}")
        return self.token

    def logout(self) -> None:
        self.token = None

    # Fail before any request is issued when there is no credential.
    def require_token(self) -> str:
        if not self.token:
            raise AuthenticationError("No session token. Call login() before requesting OneRoster data.")
        return self.token

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
