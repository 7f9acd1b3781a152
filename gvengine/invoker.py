"""Run the layout program with ``subprocess.run()``."""

import logging
import subprocess
from typing import List, Optional, Sequence

from . import config as cfg
from .errors import RenderInvocationError, RenderTimeoutError
from .output import OutputSpec, RenderResult

__all__ = ["RenderInvoker"]


log = logging.getLogger(__name__)


class RenderInvoker:
    """RenderInvoker builds the renderer command line and runs it."""

    def build_command(self, renderer: str, input_file: str, outputs: Sequence[OutputSpec]) -> List[str]:
        """Return the argument list for rendering ``input_file``.

        Every output contributes a format flag and an output flag, in the
        given order. The input file is always the last argument.
        """
        cmd = [renderer]
        for output in outputs:
            cmd.append(f"{cfg.FORMAT_FLAG}{output.format}")
            cmd.append(f"{cfg.OUTPUT_FLAG}{output.path}")
        cmd.append(input_file)
        return cmd

    def invoke(
        self,
        renderer: str,
        input_file: str,
        outputs: Sequence[OutputSpec],
        directory: str = cfg.DEFAULT_DIRECTORY,
        timeout: Optional[float] = None,
    ) -> RenderResult:
        """Run the renderer and wait for it to exit.

        A non-zero exit status is not an error here, it is returned in
        :attr:`RenderResult.exit_code`.

        :param renderer: Path to the layout program.
        :param input_file: Graph description file to render.
        :param outputs: Output specs, in command line order.
        :param directory: Working directory of the renderer.
        :param timeout: Seconds to wait before the renderer is killed. Waits
            forever if not given.
        :raises RenderTimeoutError: If the renderer ran longer than ``timeout``.
        :raises RenderInvocationError: If the renderer could not be run.
        """
        cmd = self.build_command(renderer, input_file, outputs)
        produced_files = tuple(output.path for output in outputs)

        log.debug("run %r in %r", cmd, directory)
        try:
            proc = subprocess.run(cmd, cwd=directory, timeout=timeout)
        except subprocess.TimeoutExpired as e:
            log.error("%r did not exit within %s seconds", renderer, timeout)
            raise RenderTimeoutError(f"{renderer!r} timed out after {timeout} seconds", e) from e
        except OSError as e:
            log.error("failed to run %r: %s", cmd, e)
            raise RenderInvocationError(f"failed to run {renderer!r}: {e}", e) from e

        if proc.returncode != 0:
            log.warning("%r exited with status %d", renderer, proc.returncode)
        return RenderResult(proc.returncode, produced_files)
