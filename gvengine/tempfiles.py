import codecs
import logging
import os
import tempfile
from typing import Optional

from . import config as cfg
from .errors import IOFailure

log = logging.getLogger(__name__)


class TempArtifactWriter:
    """TempArtifactWriter stages graph descriptions in temporary files."""

    def __init__(self, prefix: str = cfg.TEMP_PREFIX, directory: Optional[str] = None, encoding: str = cfg.ENCODING):
        """TempArtifactWriter creates files holding one graph description each.

        :param prefix: Filename prefix of the temporary files.
        :param directory: Where to create the files. Default is the system
            temporary directory.
        :param encoding: Text encoding of the written content.
        """
        self.prefix = prefix
        self.directory = directory
        # Unknown encodings fail here, not halfway through a write.
        self.encoding = codecs.lookup(encoding).name

    def write(self, suffix: str, content: Optional[str] = None) -> str:
        """Create a new uniquely named file and write ``content`` to it.

        :param suffix: Naming hint, used as the file extension.
        :param content: Text to write. The file is left empty if not given.
        :return: Path of the created file.
        :raises IOFailure: On any filesystem error, or if ``content`` cannot be
            encoded. The file is removed in both cases.
        """
        try:
            fd, path = tempfile.mkstemp(suffix=f".{suffix}", prefix=self.prefix, dir=self.directory)
        except OSError as e:
            raise IOFailure(f"cannot create temporary file: {e}") from e

        try:
            f = os.fdopen(fd, "w", encoding=self.encoding)
        except OSError as e:
            self._close(fd)
            self._unlink(path)
            raise IOFailure(f"cannot open temporary file {path!r}: {e}") from e

        try:
            with f:
                if content:
                    f.write(content)
        except (OSError, UnicodeError) as e:
            self._unlink(path)
            raise IOFailure(f"cannot write temporary file {path!r}: {e}") from e

        log.debug("wrote %r", path)
        return path

    def remove(self, path: str) -> None:
        """Delete a file created by :meth:`write`, if it still exists."""
        try:
            os.remove(path)
        except FileNotFoundError:
            return
        except OSError as e:
            raise IOFailure(f"cannot remove temporary file {path!r}: {e}") from e
        log.debug("removed %r", path)

    @staticmethod
    def _close(fd: int) -> None:
        try:
            os.close(fd)
        except OSError:
            log.debug("descriptor %d already closed", fd)

    @staticmethod
    def _unlink(path: str) -> None:
        try:
            os.remove(path)
        except OSError:
            log.debug("could not remove partial file %r", path)
