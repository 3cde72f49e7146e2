"""Custom warning category for looksee."""


class LookseeWarning(UserWarning):
    """Warning category for problems looksee works around, such as a `COLUMNS`
    environment variable that isn't an integer.

    Silence them with:
    >>> import warnings
    >>> warnings.filterwarnings("ignore", category=LookseeWarning)
    """
