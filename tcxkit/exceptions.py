"""Exceptions raised while extracting data from TCX documents."""


class TcxError(Exception):
    """Base class for every error raised by tcxkit itself."""


class MissingFieldError(TcxError):
    """A field that must be present in a lap is missing.

    ``path`` holds the tag path that could not be resolved, e.g.
    ``("Extensions", "LX", "AvgSpeed")``.
    """

    def __init__(self, path: tuple[str, ...]):
        self.path = path
        super().__init__(f"Missing required field: {' -> '.join(path)}")


class MalformedValueError(TcxError, ValueError):
    """A numeric field is present but its text is not a number."""

    def __init__(self, tag: str, text: str | None):
        self.tag = tag
        self.text = text
        super().__init__(f"Malformed numeric value in <{tag}>: {text!r}")


class ConfigError(TcxError):
    """A configuration value cannot be converted to the type it needs."""
