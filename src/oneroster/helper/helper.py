# SPDX-License-Identifier: Apache-2.0
# Licensed to the Ed-Fi Alliance under one or more agreements.
# The Ed-Fi Alliance licenses this file to you under the Apache License, Version 2.0.
# See the LICENSE and NOTICES files in the project root for more information.

import json

from dagster import file_relative_path

from oneroster.helper.exceptions import ConfigurationError

# Constants for endpoint.json
RESOURCE = 'resource'
COLLECTION_KEY = 'collection_key'
RECORD_KEY = 'record_key'

# Constants for providers.json
TOKEN_PATH = 'token_path'
DATA_PATH = 'data_path'


# List of resources supported by the client
def get_endpoint() -> list:
    with open(file_relative_path(__file__, './endpoint/endpoint.json'), "r") as file:
        data = json.load(file)
    return data


def get_resource(resource: str) -> dict:
    for endpoint in get_endpoint():
        if endpoint[RESOURCE] == resource:
            return endpoint
    supported = [endpoint[RESOURCE] for endpoint in get_endpoint()]
    raise ConfigurationError(f"Unknown OneRoster resource '{resource}'. Supported resources: {supported}")


def get_providers() -> dict:
    with open(file_relative_path(__file__, './providers/providers.json'), "r") as file:
        data = json.load(file)
    return data


def get_provider(name: str) -> dict:
    providers = get_providers()
    if name not in providers:
        raise ConfigurationError(f"Unknown OneRoster provider '{name}'. Supported providers: {sorted(providers)}")
    return providers[name]


# Create a function to get endpoint url.
def get_url(api_url: str, path: str, resource: str, sourced_id: str = None) -> str:
    record = f"/{sourced_id}" if sourced_id else ""
    return f"{api_url.rstrip('/')}/{path.strip('/')}/{resource}{record}"


# Get headers for API call.
def get_headers(token: str) -> dict:
    return {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
        "Accept": "application/json"
    }
