"""Exception taxonomy for dbsizegen."""

from __future__ import annotations


class DbSizeGenError(Exception):
    """Base class for every error raised by dbsizegen itself."""


class MalformedSizeError(DbSizeGenError, ValueError):
    """The --size value could not be parsed."""


class ProvisionError(DbSizeGenError):
    """Database or table setup failed for a reason other than 'already exists'."""


class ProbeError(DbSizeGenError):
    """Statistics refresh or size query failed."""


class TransientCapacityError(DbSizeGenError):
    """The server refused a connection or statement because it is out of connections."""


class InsertError(DbSizeGenError):
    def __init__(self, table: str, reason: object):
        super().__init__(f"failed to insert row into table {table}: {reason}")
        self.table = table
        self.reason = reason


class RunAbortedError(DbSizeGenError):
    """Workers died or outlived the join timeout; no trustworthy final size exists."""
