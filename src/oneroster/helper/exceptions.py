# SPDX-License-Identifier: Apache-2.0
# Licensed to the Ed-Fi Alliance under one or more agreements.
# The Ed-Fi Alliance licenses this file to you under the Apache License, Version 2.0.
# See the LICENSE and NOTICES files in the project root for more information.

from typing import Optional


class OneRosterError(Exception):
    pass


class ConfigurationError(OneRosterError):
    pass


class AuthenticationError(OneRosterError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(OneRosterError):
    pass


class HttpError(OneRosterError):
    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.url = url

    def __str__(self) -> str:
        message = super().__str__()
        if self.status_code is not None:
            return f"{message} (status {self.status_code})"
        return message
