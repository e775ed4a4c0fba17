"""Core domain types and logic."""

from .config import DEFAULT_PLAN, MANIFEST_NAME, ScaffoldPlan, TemplateCopy
from .errors import ErrorCode
from .result import Err, Ok, Result, is_err, is_ok
from .semver import BumpKind, InvalidBumpKind, InvalidVersionFormat, SemVer, increment_version

__all__ = [
    # config
    "DEFAULT_PLAN",
    "MANIFEST_NAME",
    "ScaffoldPlan",
    "TemplateCopy",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    # semver
    "BumpKind",
    "InvalidBumpKind",
    "InvalidVersionFormat",
    "SemVer",
    "increment_version",
]
