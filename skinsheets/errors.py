"""Exceptions raised while reading and composing skins."""


class SkinError(Exception):
    """Base class for every skin loading failure."""


class SkinNotFoundError(SkinError, FileNotFoundError):
    """The requested skin file does not exist."""

    def __init__(self, path):
        super().__init__(f"skin file not found: {path}")
        self.path = path


class InvalidArchiveError(SkinError):
    """The archive could not be read, or an entry escapes the archive root."""

    def __init__(self, reason):
        super().__init__(f"invalid skin archive: {reason}")


class MissingRequiredFileError(SkinError):
    """A sprite every skin must provide could not be resolved."""

    def __init__(self, name):
        super().__init__(f"missing required file: {name}")


class InvalidBitmapError(SkinError):
    """Decoding, cropping or sampling a bitmap failed."""

    def __init__(self, reason):
        super().__init__(f"invalid bitmap: {reason}")


class InvalidConfigurationError(SkinError):
    """The skin's text configuration could not be read."""

    def __init__(self, reason):
        super().__init__(f"invalid configuration: {reason}")
