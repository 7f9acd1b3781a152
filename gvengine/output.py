import os
from typing import List, NamedTuple, Optional, Tuple

from . import config as cfg


class OutputSpec:
    """OutputSpec represents one artifact the renderer should produce."""

    def __init__(self, format: str, path: Optional[str] = None, filename: str = cfg.DEFAULT_FILENAME):
        """OutputSpec describes an output format and its destination.

        :param format: Renderer format token, e.g. 'png' or 'svg'.
        :param path: Destination path. If not given, it will be derived from
            the filename and the format.
        :param filename: Filename stem used for the derived path.
        """
        self.format = format
        self.filename = filename
        self._path = path

    def __repr__(self) -> str:
        return f"<OutputSpec {self.format} {self.path!r}>"

    @property
    def path(self) -> str:
        if self._path:
            return self._path
        return f"{self.filename}.{self.format}"

    @path.setter
    def path(self, path: str) -> None:
        self._path = path

    @property
    def explicit(self) -> bool:
        return bool(self._path)


class RenderResult(NamedTuple):
    """Outcome of one renderer invocation.

    ``produced_files`` lists the expected output paths in command line order.
    They come from the output specs, the filesystem is not consulted.
    """

    exit_code: int
    produced_files: Tuple[str, ...]
    input_file: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    def missing_files(self, directory: str = cfg.DEFAULT_DIRECTORY) -> List[str]:
        """Return the produced files that do not exist.

        :param directory: Directory the renderer ran in. Relative paths are
            resolved against it.
        """
        return [p for p in self.produced_files if not os.path.exists(os.path.join(directory, p))]
