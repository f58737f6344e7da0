from __future__ import annotations

from typing import Any

ERROR_CODE_DECODE_MALFORMED = "DECODE_MALFORMED"
ERROR_CODE_DECODE_UNSUPPORTED_FORMAT = "DECODE_UNSUPPORTED_FORMAT"
ERROR_CODE_CONFIG_INVALID = "CONFIG_INVALID"


class ValueDiffError(Exception):
    code: str = "VALUEDIFF_ERROR"

    def __init__(self, message: str, *, code: str | None = None, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.details = dict(details or {})

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class DecodeError(ValueDiffError, ValueError):
    code = ERROR_CODE_DECODE_MALFORMED


class ConfigError(ValueDiffError, ValueError):
    code = ERROR_CODE_CONFIG_INVALID


__all__ = [
    "ERROR_CODE_CONFIG_INVALID",
    "ERROR_CODE_DECODE_MALFORMED",
    "ERROR_CODE_DECODE_UNSUPPORTED_FORMAT",
    "ConfigError",
    "DecodeError",
    "ValueDiffError",
]
