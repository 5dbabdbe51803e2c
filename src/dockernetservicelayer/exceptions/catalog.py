# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Self

from pydantic import BaseModel

from dockernetservicelayer.apiclient.exceptions import (
    NapiException,
    NapiNotFoundException,
)
from dockernetservicelayer.exceptions.constants import (
    AMBIGUOUS_NETWORK_ID_VIOLATION_TYPE,
    INVALID_ARGUMENT_VIOLATION_TYPE,
    NAPI_REQUEST_FAILED_VIOLATION_TYPE,
    NETWORK_NOT_FOUND_VIOLATION_TYPE,
    NO_FREE_VLAN_VIOLATION_TYPE,
    UNEXISTING_RESOURCE_VIOLATION_TYPE,
)


class BaseExceptionDetail(BaseModel):
    type: str
    message: str
    field: str | None = None
    location: str | None = None


class BaseException(Exception):
    def __init__(
        self, message: str, details: list[BaseExceptionDetail] | None = None
    ):
        super().__init__(message)
        self.details = details


class NotFoundException(BaseException):
    def __init__(self, details: list[BaseExceptionDetail] | None = None):
        super().__init__("The requested resource was not found.", details)


class ValidationException(BaseException):
    def __init__(self, details: list[BaseExceptionDetail] | None = None):
        super().__init__("Invalid value.", details)

    @classmethod
    def build_for_field(cls, field: str, message: str) -> Self:
        return cls(
            details=[
                BaseExceptionDetail(
                    type=INVALID_ARGUMENT_VIOLATION_TYPE,
                    field=field,
                    message=message,
                )
            ]
        )


class BadGatewayException(BaseException):
    def __init__(
        self,
        details: list[BaseExceptionDetail] | None = None,
        status_code: int | None = None,
    ):
        super().__init__("The network service returned an error.", details)
        self.status_code = status_code


class NetworkNotFoundException(NotFoundException):
    def __init__(self, identifier: str):
        super().__init__(
            details=[
                BaseExceptionDetail(
                    type=NETWORK_NOT_FOUND_VIOLATION_TYPE,
                    message=f"network {identifier} not found",
                )
            ]
        )
        self.identifier = identifier


class AmbiguousNetworkIdException(BaseException):
    def __init__(self, identifier: str):
        super().__init__(
            f"Network id {identifier} matches more than one network.",
            details=[
                BaseExceptionDetail(
                    type=AMBIGUOUS_NETWORK_ID_VIOLATION_TYPE,
                    message=(
                        f"network {identifier} is ambiguous "
                        "(multiple networks matched this id prefix)"
                    ),
                )
            ],
        )
        self.identifier = identifier


class ResourceExhaustedException(BaseException):
    def __init__(self, message: str):
        super().__init__(
            "No resources available to satisfy the request.",
            details=[
                BaseExceptionDetail(
                    type=NO_FREE_VLAN_VIOLATION_TYPE,
                    message=message,
                )
            ],
        )


def wrap_napi_exception(exc: NapiException, message: str) -> BaseException:
    """Return the catalog exception to raise for a failed NAPI request.

    The caller is expected to chain `exc` with `raise ... from exc`.
    """
    detail_message = f"{message}: {exc.message}"
    if isinstance(exc, NapiNotFoundException):
        return NotFoundException(
            details=[
                BaseExceptionDetail(
                    type=UNEXISTING_RESOURCE_VIOLATION_TYPE,
                    message=detail_message,
                )
            ]
        )
    return BadGatewayException(
        details=[
            BaseExceptionDetail(
                type=NAPI_REQUEST_FAILED_VIOLATION_TYPE,
                message=detail_message,
            )
        ],
        status_code=exc.status_code,
    )
