from __future__ import annotations


class TutorError(Exception):
    """Base class for errors surfaced to HTTP callers."""

    status_code: int = 500


class ValidationError(TutorError):
    status_code = 400


class NotFoundError(TutorError):
    """A referenced Session or Word does not exist."""

    status_code = 404


class StoreError(TutorError):
    """Connectivity or query failure in the graph store."""

    status_code = 500
