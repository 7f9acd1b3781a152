"""Render Graphviz graph descriptions with the external layout programs."""

from .engine import Engine
from .errors import (
    EngineError,
    ExecutableNotFoundError,
    InvalidStateError,
    IOFailure,
    MissingOutputWarning,
    RenderInvocationError,
    RenderTimeoutError,
)
from .graph import serialize
from .invoker import RenderInvoker
from .output import OutputSpec, RenderResult
from .resolver import ExecutableResolver, search_path
from .tempfiles import TempArtifactWriter

__all__ = [
    "Engine",
    "OutputSpec",
    "RenderResult",
    "ExecutableResolver",
    "TempArtifactWriter",
    "RenderInvoker",
    "search_path",
    "serialize",
    "EngineError",
    "ExecutableNotFoundError",
    "IOFailure",
    "RenderInvocationError",
    "RenderTimeoutError",
    "InvalidStateError",
    "MissingOutputWarning",
]
