"""Error codes and user-facing reporting for theme loading failures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import json
from pathlib import Path
from typing import Any

import yaml


class ErrorCode(Enum):
    """Failure categories reported by theme loading and lookup."""

    # Bundle files
    BUNDLE_NOT_FOUND = "bundle_not_found"
    BUNDLE_UNREADABLE = "bundle_unreadable"
    BUNDLE_TOO_LARGE = "bundle_too_large"
    BUNDLE_UNSUPPORTED = "bundle_unsupported"
    BUNDLE_SYNTAX = "bundle_syntax"
    BUNDLE_INVALID = "bundle_invalid"

    # Registry
    THEME_NOT_FOUND = "theme_not_found"
    REGISTRY_MISSING = "registry_missing"

    UNEXPECTED = "unexpected"


HINTS: dict[ErrorCode, str] = {
    ErrorCode.BUNDLE_NOT_FOUND: "The theme file no longer exists.",
    ErrorCode.BUNDLE_UNREADABLE: "The theme file could not be read. Check its permissions and encoding.",
    ErrorCode.BUNDLE_TOO_LARGE: "Theme files are limited to 512 KB.",
    ErrorCode.BUNDLE_UNSUPPORTED: "Theme files must end in .yaml, .yml or .json.",
    ErrorCode.BUNDLE_SYNTAX: "The theme file could not be parsed as YAML or JSON.",
    ErrorCode.BUNDLE_INVALID: "Check the manifest meta, features and section shapes.",
    ErrorCode.THEME_NOT_FOUND: "The requested theme is not registered.",
    ErrorCode.REGISTRY_MISSING: "No theme registry is available in this context.",
    ErrorCode.UNEXPECTED: "An unexpected error occurred while handling themes.",
}

# Checked in order against the lower-cased message of a ThemeValidationError.
_VALIDATION_MARKERS: tuple[tuple[str, ErrorCode], ...] = (
    ("exceeds max size", ErrorCode.BUNDLE_TOO_LARGE),
    ("unsupported theme file type", ErrorCode.BUNDLE_UNSUPPORTED),
    ("unable to stat", ErrorCode.BUNDLE_NOT_FOUND),
    ("unable to read", ErrorCode.BUNDLE_UNREADABLE),
    ("unable to parse", ErrorCode.BUNDLE_SYNTAX),
)


@dataclass
class CredWalletError(Exception):
    """A classified failure with the file it concerns, if any."""

    code: ErrorCode
    detail: str = ""
    path: Path | None = None
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def hint(self) -> str:
        return HINTS[self.code]

    def __str__(self) -> str:
        text = f"[{self.code.value}] {self.detail or self.hint}"
        if self.path is not None:
            text += f" ({self.path})"
        return text

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "detail": self.detail,
            "hint": self.hint,
            "path": None if self.path is None else str(self.path),
            "context": dict(self.context),
        }


def classify_exception(exc: Exception, path: Path | None = None) -> CredWalletError:
    """Map an exception raised while loading or looking up themes to an ErrorCode.

    Theme exceptions are matched by class name so that this module stays
    importable from inside ``credwallet.ui.themes``.
    """
    if isinstance(exc, CredWalletError):
        return exc

    kind = type(exc).__name__
    context = {"exception": kind}

    if kind == "ThemeScopeError":
        return CredWalletError(ErrorCode.REGISTRY_MISSING, str(exc), context=context)
    if isinstance(exc, (yaml.YAMLError, json.JSONDecodeError)):
        return CredWalletError(ErrorCode.BUNDLE_SYNTAX, str(exc), path, context)
    if kind == "ThemeValidationError":
        lowered = str(exc).lower()
        for marker, code in _VALIDATION_MARKERS:
            if marker in lowered:
                return CredWalletError(code, str(exc), path, context)
        return CredWalletError(ErrorCode.BUNDLE_INVALID, str(exc), path, context)
    if isinstance(exc, FileNotFoundError):
        return CredWalletError(ErrorCode.BUNDLE_NOT_FOUND, str(exc), path, context)
    if isinstance(exc, (PermissionError, IsADirectoryError, UnicodeDecodeError)):
        return CredWalletError(ErrorCode.BUNDLE_UNREADABLE, str(exc), path, context)
    return CredWalletError(ErrorCode.UNEXPECTED, f"{kind}: {exc}", path, context)


def format_error_for_user(error: CredWalletError | Exception) -> str:
    """Render an error as short text: what happened, what to check, which file."""
    if not isinstance(error, CredWalletError):
        error = classify_exception(error)
    lines = [error.detail or error.hint]
    if error.detail and error.detail != error.hint:
        lines.append(error.hint)
    if error.path is not None:
        lines.append(f"File: {error.path.name}")
    return "\n\n".join(lines)
