"""Exception hierarchy for the export pipeline."""

from __future__ import annotations


class XCTransferError(Exception):
    """Base class for errors that abort an export run."""


class DataAccessError(XCTransferError):
    """The ShareData file could not be opened, queried, or decoded."""


class WriteError(XCTransferError):
    """The KML output file could not be created or written."""
