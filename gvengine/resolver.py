"""Locate layout programs on a search path."""

import logging
import os
from typing import List, Mapping, Optional, Sequence

from . import config as cfg
from .errors import ExecutableNotFoundError

__all__ = ["ExecutableResolver", "search_path"]


log = logging.getLogger(__name__)


def search_path(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return the directories listed in the PATH variable of ``environ``."""
    if environ is None:
        environ = os.environ
    value = environ.get(cfg.PATH_ENV)
    if not value:
        return []
    return value.split(os.pathsep)


class ExecutableResolver:
    """ExecutableResolver finds the first usable executable on a search path."""

    @staticmethod
    def _usable(path: str) -> bool:
        return os.path.isfile(path) and os.access(path, os.X_OK)

    def resolve(self, program: str, search_path: Optional[Sequence[str]]) -> str:
        """Return the absolute path of ``program``.

        The directories are tried in order and the first one holding an
        executable regular file named ``program`` wins.

        :param program: Program name, or an absolute path to the program.
        :param search_path: Ordered directories to search.
        :raises ExecutableNotFoundError: If no directory yields a match.
        """
        if os.path.isabs(program) and self._usable(program):
            log.debug("using %r", program)
            return program

        for directory in search_path or ():
            # Empty PATH entries would silently mean the current directory.
            if not directory:
                continue
            candidate = os.path.join(directory, program)
            if self._usable(candidate):
                log.debug("resolved %r to %r", program, candidate)
                return os.path.abspath(candidate)

        raise ExecutableNotFoundError(program)
