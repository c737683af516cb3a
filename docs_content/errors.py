"""Custom exceptions for docs_content."""


class ContentError(Exception):
    """Base exception for content hierarchy operations."""


class ContentNotFoundError(ContentError):
    """No section, category or article matches the requested path or id."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(message)
        self.path = path


class SnapshotFormatError(ContentError):
    """Snapshot document is malformed (missing keys, wrong shapes)."""


class IntegrityViolation(ContentError):
    """Snapshot breaks a hierarchy invariant; publication must not happen."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        summary = "; ".join(self.problems[:5])
        if len(self.problems) > 5:
            summary += f"; ... ({len(self.problems) - 5} more)"
        super().__init__(f"Snapshot integrity check failed: {summary}")
