"""Exceptions raised while building, restoring or transporting saves."""

from typing import Optional


class ArchiveSaveError(Exception):
    """Base class for save/restore failures."""


class UnsupportedVersionError(ArchiveSaveError, ValueError):
    """The save declares a format version this build cannot restore."""

    def __init__(self, version: Optional[str]):
        self.version = version
        super().__init__(f"Save version is not supported: {version!r}")


class MalformedContainerError(ArchiveSaveError):
    """A binary container is unreadable or lacks the expected document."""

    def __init__(self, document: str, reason: str):
        self.document = document
        self.reason = reason
        super().__init__(f"Malformed container for {document}: {reason}")


class SaveFormatError(ArchiveSaveError, ValueError):
    """A serialized payload does not decode to a save structure."""
