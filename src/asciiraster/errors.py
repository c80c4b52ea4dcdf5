class ConversionError(Exception):
    """A pipeline stage failed. ``stage`` names the stage for reporting."""

    def __init__(self, message: str, stage: str):
        super().__init__(message)
        self.stage = stage


class DecodeError(ConversionError):
    def __init__(self, message: str, stage: str = "decode"):
        super().__init__(message, stage)


class OutputError(ConversionError):
    """The destination file could not be created."""


class EncodeError(ConversionError):
    """The in-memory image could not be serialized."""
