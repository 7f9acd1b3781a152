import os
import shutil
import subprocess
import tempfile
import textwrap
import unittest
from unittest.mock import patch

from gvengine import OutputSpec, RenderInvocationError, RenderInvoker, RenderTimeoutError

# Records its arguments and touches every -o file in the working directory.
FAKE_RENDERER = textwrap.dedent(
    """\
    #!/bin/sh
    printf '%s\\n' "$@" > args.txt
    for arg in "$@"; do
      case "$arg" in
        -o*) : > "${arg#-o}" ;;
      esac
    done
    exit {status}
    """
)


def write_script(directory, name, content):
    path = os.path.join(directory, name)
    with open(path, "w") as f:
        f.write(content)
    os.chmod(path, 0o755)
    return path


class BuildCommandTest(unittest.TestCase):
    def test_order(self):
        outputs = [OutputSpec("png", "/tmp/out.png"), OutputSpec("svg", "/tmp/out.svg")]
        cmd = RenderInvoker().build_command("dot", "/tmp/in.dot", outputs)
        self.assertEqual(cmd, ["dot", "-Tpng", "-o/tmp/out.png", "-Tsvg", "-o/tmp/out.svg", "/tmp/in.dot"])

    def test_default_paths(self):
        outputs = [OutputSpec("pdf", filename="example")]
        cmd = RenderInvoker().build_command("/usr/bin/neato", "in.gv", outputs)
        self.assertEqual(cmd, ["/usr/bin/neato", "-Tpdf", "-oexample.pdf", "in.gv"])


class InvokeTest(unittest.TestCase):
    def setUp(self):
        self.invoker = RenderInvoker()
        self.outputs = [OutputSpec("png", "out.png"), OutputSpec("svg", "out.svg")]

    def test_run_arguments(self):
        with patch("subprocess.run") as run:
            run.return_value = subprocess.CompletedProcess([], 0)
            result = self.invoker.invoke("dot", "in.gv", self.outputs, directory="/work", timeout=5)
        run.assert_called_once_with(
            ["dot", "-Tpng", "-oout.png", "-Tsvg", "-oout.svg", "in.gv"], cwd="/work", timeout=5
        )
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.produced_files, ("out.png", "out.svg"))
        self.assertIsNone(result.input_file)
        with self.assertRaises(AttributeError):
            result.produced_files.append("other.pdf")

    def test_nonzero_exit_is_not_an_error(self):
        with patch("subprocess.run") as run:
            run.return_value = subprocess.CompletedProcess([], 1)
            with self.assertLogs("gvengine.invoker", level="WARNING"):
                result = self.invoker.invoke("dot", "in.gv", self.outputs)
        self.assertEqual(result.exit_code, 1)
        self.assertEqual(result.produced_files, ("out.png", "out.svg"))

    def test_launch_failure(self):
        error = PermissionError("permission denied")
        with patch("subprocess.run", side_effect=error):
            with self.assertRaises(RenderInvocationError) as cm:
                self.invoker.invoke("dot", "in.gv", self.outputs)
        self.assertIs(cm.exception.cause, error)
        self.assertIs(cm.exception.__cause__, error)

    def test_timeout(self):
        error = subprocess.TimeoutExpired(["dot"], 1)
        with patch("subprocess.run", side_effect=error):
            with self.assertRaises(RenderTimeoutError) as cm:
                self.invoker.invoke("dot", "in.gv", self.outputs, timeout=1)
        self.assertIsInstance(cm.exception, RenderInvocationError)
        self.assertIs(cm.exception.cause, error)


@unittest.skipIf(os.name == "nt", "requires a POSIX shell")
class InvokeProcessTest(unittest.TestCase):
    def setUp(self):
        self.dir = tempfile.mkdtemp()
        self.invoker = RenderInvoker()

    def tearDown(self):
        shutil.rmtree(self.dir)

    def test_working_directory(self):
        renderer = write_script(self.dir, "fake", FAKE_RENDERER.replace("{status}", "0"))
        outputs = [OutputSpec("png", "a.png"), OutputSpec("svg", "a.svg")]
        result = self.invoker.invoke(renderer, "in.gv", outputs, directory=self.dir)

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.missing_files(self.dir), [])
        with open(os.path.join(self.dir, "args.txt")) as f:
            self.assertEqual(f.read().splitlines(), ["-Tpng", "-oa.png", "-Tsvg", "-oa.svg", "in.gv"])

    def test_exit_status(self):
        renderer = write_script(self.dir, "fake", FAKE_RENDERER.replace("{status}", "3"))
        result = self.invoker.invoke(renderer, "in.gv", [OutputSpec("png", "a.png")], directory=self.dir)
        self.assertEqual(result.exit_code, 3)

    def test_missing_renderer(self):
        with self.assertRaises(RenderInvocationError) as cm:
            self.invoker.invoke(os.path.join(self.dir, "missing"), "in.gv", [OutputSpec("png")])
        self.assertIsInstance(cm.exception.cause, FileNotFoundError)

    def test_timeout_kills_renderer(self):
        renderer = write_script(self.dir, "slow", "#!/bin/sh\nexec sleep 30\n")
        with self.assertRaises(RenderTimeoutError):
            self.invoker.invoke(renderer, "in.gv", [OutputSpec("png")], directory=self.dir, timeout=0.2)
