class LenscraftError(Exception):
    """Base class for every error raised by lenscraft."""


class ImageLoadError(LenscraftError, OSError):
    """The file could not be read or decoded into an Image."""


class UnsupportedFormatError(ImageLoadError):
    """The file extension is not one of the configured image formats."""


class ImageSaveError(LenscraftError, OSError):
    """The Image could not be encoded or written to disk."""


class SnapshotMismatchError(LenscraftError, ValueError):
    """Reset was requested but the live grid no longer matches the snapshot's size."""


class SnapshotMissingError(LenscraftError, ValueError):
    """Reset was requested on an Image that carries no original snapshot."""
