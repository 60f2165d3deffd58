"""Exceptions raised by layout detection, measurement and the rewrite step.

Every error carries a user-facing message; callers report ``str(error)``.
"""


class NewsFitError(Exception):
    """Base class for all errors surfaced to the caller."""


class SelectionError(NewsFitError):
    """The selection is not a single article frame, or the frame has no columns."""


class CredentialMissingError(NewsFitError):
    """No Claude API key has been saved."""


class OracleError(NewsFitError):
    """The Claude rewrite request failed or returned no usable text."""


class MeasurementError(NewsFitError):
    """Fonts could not be loaded or a text layer could not be measured."""


class InputError(NewsFitError):
    """Article data is not a JSON object of text fields."""
