"""go2rpm exceptions."""

from typing import List
from dataclasses import dataclass


class Go2RpmError(Exception):
    """Base class for fatal go2rpm errors.

    Every error carries the process exit status the CLI should return.
    """

    exit_code = 1

    def __init__(self, message: str, exit_code: int = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class CloneError(Go2RpmError):
    """Raised when neither git nor hg can clone the package."""


class CommitNotFoundError(Go2RpmError):
    """Raised when the tip commit of a checkout cannot be determined."""


class DocFileError(Go2RpmError):
    """Raised when a documentation file cannot be read."""


class ToolNotFoundError(Go2RpmError):
    """Raised when a required external program is not installed."""


class SpecWriteError(Go2RpmError):
    """Raised when the spec file cannot be written."""


class BuildError(Go2RpmError):
    """Raised when rpmbuild fails to produce a source package."""

    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr


class TemplateError(Go2RpmError):
    """Raised when the spec template cannot be rendered."""

    def __init__(self, message: str, keys: List[str] = None):
        super().__init__(message)
        self.keys = keys or []


@dataclass
class ValidationError:
    """Single validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class LicenseRulesError(Go2RpmError):
    """Raised when the license signature table fails validation.

    Collects every problem found so they can be reported together.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors

        messages = []
        for error in errors:
            if error.path:
                messages.append(f"Validation error at {error.path}: {error.message}")
            else:
                messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages), exit_code=2)
