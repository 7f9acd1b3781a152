import logging
import warnings
from typing import Dict, List, Optional

from . import config as cfg
from .errors import InvalidStateError, IOFailure, MissingOutputWarning
from .graph import GraphLike, serialize
from .invoker import RenderInvoker
from .output import OutputSpec, RenderResult
from .resolver import ExecutableResolver, search_path
from .tempfiles import TempArtifactWriter

log = logging.getLogger(__name__)


class Engine:
    """Engine renders a graph with an external Graphviz layout program."""

    def __init__(
        self,
        graph: GraphLike,
        name: str = "",
        filename: str = "",
        layout: str = cfg.DEFAULT_LAYOUT,
        outformat: str = cfg.DEFAULT_FORMAT,
        directory: str = cfg.DEFAULT_DIRECTORY,
        timeout: Optional[float] = None,
        keep_input: bool = False,
        resolver: Optional[ExecutableResolver] = None,
        writer: Optional[TempArtifactWriter] = None,
        invoker: Optional[RenderInvoker] = None,
    ):
        """Engine holds the output registry and the rendering options.

        :param graph: Graph to render. DOT text or a graphviz graph.
        :param name: Graph name. It will be used for output filenames if the
            filename isn't given.
        :param filename: Output filename stem, without the extension.
            If not given, it will be generated from the name.
        :param layout: Layout program. One of dot, neato, fdp, sfdp, twopi,
            circo or any other program accepting the dot command line.
        :param outformat: Initial output format. Default is 'png'.
        :param directory: Directory the layout program runs in.
        :param timeout: Seconds a render may take before the program is
            killed. No limit if not given.
        :param keep_input: Keep the temporary DOT file after rendering.
        """
        self.graph = graph
        self.name = name
        if not name and not filename:
            filename = cfg.DEFAULT_FILENAME
        elif not filename:
            filename = "_".join(name.split()).lower()
        self.filename = filename

        self.layout = layout
        self.directory = directory
        self.timeout = timeout
        self.keep_input = keep_input

        self.resolver = resolver or ExecutableResolver()
        self.writer = writer or TempArtifactWriter()
        self.invoker = invoker or RenderInvoker()

        self._outputs: Dict[str, OutputSpec] = {}
        self.add_output(outformat)

    def __str__(self) -> str:
        return self.source

    @property
    def source(self) -> str:
        return serialize(self.graph)

    def add_output(self, format: str) -> OutputSpec:
        """Return the output for ``format``, registering it if needed."""
        output = self._outputs.get(format)
        if output is None:
            output = OutputSpec(format, filename=self.filename)
            self._outputs[format] = output
        return output

    def remove_output(self, format: str) -> "Engine":
        """Unregister the output for ``format``.

        :raises InvalidStateError: If only one output is registered.
        """
        if len(self._outputs) == 1:
            raise InvalidStateError("at least one output must be defined")
        self._outputs.pop(format, None)
        return self

    def list_outputs(self) -> List[OutputSpec]:
        return list(self._outputs.values())

    def set_layout(self, layout: str) -> "Engine":
        # Unknown layouts are rejected by the renderer lookup, not here.
        self.layout = layout
        return self

    def set_directory(self, directory: str) -> "Engine":
        self.directory = directory
        return self

    def set_output_path(self, path: str, format: Optional[str] = None) -> "Engine":
        """Set the destination path of an output.

        :param path: Destination path.
        :param format: Output to change. May be omitted only when a single
            output is registered.
        :raises InvalidStateError: If the target output is unknown or ambiguous.
        """
        if format is None:
            if len(self._outputs) > 1:
                raise InvalidStateError(f"{len(self._outputs)} outputs are defined, the format must be given")
            output = next(iter(self._outputs.values()))
        else:
            output = self._outputs.get(format)
            if output is None:
                raise InvalidStateError(f'"{format}" is not a defined output')
        output.path = path
        return self

    def render(self, verify: bool = False) -> RenderResult:
        """Render the graph into every registered output.

        The graph is written to a temporary file which is removed afterwards,
        unless ``keep_input`` is set.

        :param verify: Warn about outputs the renderer did not write.
        :return: Exit status and expected output paths.
        """
        source = self.source
        input_file = self.writer.write(cfg.INPUT_SUFFIX, source)
        try:
            renderer = self.resolver.resolve(self.layout, search_path())
            result = self.invoker.invoke(
                renderer, input_file, self.list_outputs(), directory=self.directory, timeout=self.timeout
            )
        finally:
            self._release(input_file)

        if self.keep_input:
            result = result._replace(input_file=input_file)

        if verify:
            for path in result.missing_files(self.directory):
                warnings.warn(f"{self.layout} did not write {path!r}", category=MissingOutputWarning)
        return result

    def _release(self, input_file: str) -> None:
        # Called from a finally block, must not raise.
        if self.keep_input:
            log.info("kept graph description at %r", input_file)
            return
        try:
            self.writer.remove(input_file)
        except IOFailure as e:
            log.warning("%s", e)
