"""Error and stage code constants for oasmore.

These constants prevent stringly-typed error codes and let callers
tell where a pipeline failed without parsing messages.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes carried by oasmore exceptions."""

    # Loading
    PARSE_FAILED = "E_PARSE_FAILED"
    MALFORMED_EXTENSION = "E_MALFORMED_EXTENSION"
    NOT_FOUND = "E_NOT_FOUND"

    # Pipeline stages
    MERGE_DIRECTORY_FAILED = "E_MERGE_DIRECTORY_FAILED"
    WRITE_FAILED = "E_WRITE_FAILED"
    EXPORT_FAILED = "E_EXPORT_FAILED"


class Stage(str, Enum):
    """Pipeline stage a StageError was raised from."""

    MERGE = "merge"
    WRITE = "write"
    EXPORT = "export"

    @property
    def code(self) -> ErrorCode:
        return _STAGE_CODES[self]


_STAGE_CODES = {
    Stage.MERGE: ErrorCode.MERGE_DIRECTORY_FAILED,
    Stage.WRITE: ErrorCode.WRITE_FAILED,
    Stage.EXPORT: ErrorCode.EXPORT_FAILED,
}
