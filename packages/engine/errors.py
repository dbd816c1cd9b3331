"""
Exceptions raised by the engine and its collaborators.

Rejected submissions are NOT exceptions: they come back as
`SubmissionResult` values from `validate`. These classes cover the cases
where the game cannot proceed at all.
"""


class ConfigurationError(Exception):
    """The word list provider produced no usable root word candidates."""


class UnsupportedLanguageError(ValueError):
    """A dictionary oracle was asked about a language it was not configured for."""


class OracleUnavailableError(RuntimeError):
    """A dictionary oracle could not answer (e.g. the remote service failed)."""


class RoundNotStartedError(RuntimeError):
    """A submission was made before any round was started."""
