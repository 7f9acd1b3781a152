"""Exception and warning classes raised by the rendering engine."""

from typing import Optional

__all__ = [
    "EngineError",
    "ExecutableNotFoundError",
    "IOFailure",
    "RenderInvocationError",
    "RenderTimeoutError",
    "InvalidStateError",
    "MissingOutputWarning",
]


class EngineError(Exception):
    """Base class for all errors raised by gvengine."""


class ExecutableNotFoundError(EngineError):
    """Raised if the layout program is not found on the search path."""

    _msg = "failed to find {!r}, make sure the Graphviz executables are on your system's PATH"

    def __init__(self, program: str) -> None:
        super().__init__(self._msg.format(program))
        self.program = program


class IOFailure(EngineError):
    """Raised if a temporary file cannot be created, written or removed."""


class RenderInvocationError(EngineError):
    """Raised if the renderer process cannot be run to completion."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class RenderTimeoutError(RenderInvocationError):
    """Raised if the renderer did not exit within the given timeout."""


class InvalidStateError(EngineError):
    """Raised if an operation would leave the engine in an invalid state."""


class MissingOutputWarning(UserWarning):
    """Warned if an expected output file was not written by the renderer."""
