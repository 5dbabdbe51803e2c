# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Any


class NapiException(Exception):
    """A request to NAPI failed.

    NAPI error bodies look like
    `{"code": "InvalidParameters", "message": "...", "errors": [...]}`,
    where each item of `errors` describes a failing field. `status_code` is
    None when NAPI couldn't be reached at all.
    """

    def __init__(
        self,
        status_code: int | None,
        message: str,
        code: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code
        self.errors = errors or []

    def has_message(self, message: str) -> bool:
        """Whether `message` is the error message, or the one of a field."""
        if self.message == message:
            return True
        return any(error.get("message") == message for error in self.errors)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (HTTP {self.status_code})"


class NapiNotFoundException(NapiException):
    """NAPI replied with a 404."""
