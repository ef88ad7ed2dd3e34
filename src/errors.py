"""Exceptions raised by the select list widget."""


class ConfigurationError(ValueError):
    """Raised when the list is set up with invalid options.

    This is always raised before anything is written to the terminal.
    """
