"""Exception hierarchy for oasmore."""

from pathlib import Path
from typing import Optional, Union

from oasmore.codes import ErrorCode, Stage


class OasMoreError(Exception):
    """Base class for all oasmore errors."""
    code: ErrorCode = ErrorCode.PARSE_FAILED


class NotFoundError(OasMoreError):
    """A directory is missing or holds no qualifying files."""
    code = ErrorCode.NOT_FOUND


class ParseError(OasMoreError):
    """A document failed to parse or validate.

    ``path`` names the offending file when the document came from disk.
    """
    code = ErrorCode.PARSE_FAILED

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{self.path}: {message}"
        super().__init__(message)


class MalformedExtensionError(ParseError):
    """A vendor extension property exists but has the wrong shape."""
    code = ErrorCode.MALFORMED_EXTENSION

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(f"extension '{key}' is malformed: {message}")


class StageError(OasMoreError):
    """A pipeline stage failed; ``stage`` says which one."""

    def __init__(self, stage: Stage, message: str):
        self.stage = stage
        self.code = stage.code
        super().__init__(f"{stage.code.value}: {message}")


class WriteError(StageError):
    """Serialization or export of a result failed."""

    def __init__(self, message: str, stage: Stage = Stage.WRITE):
        super().__init__(stage, message)
