"""Pipeline against real processes (stub toolchain binaries written as scripts)."""

import asyncio
import sys
from pathlib import Path

import pytest

from libnamekit.binaries import Host
from libnamekit.host import InMemoryHost
from libnamekit.invoker import Failure, Success, ToolInvoker
from libnamekit.pipeline import PipelineCoordinator
from libnamekit.status import StatusSink

pytestmark = pytest.mark.skipif(
    sys.platform != "linux",
    reason="Stub binaries use shebang and `.bin` naming",
)

STUB_ASSEMBLER = """
import sys
source, output = sys.argv[1], sys.argv[2]
text = open(source).read()
if "bad" in text:
    sys.stderr.write("syntax error line 3")
    sys.exit(0)
open(output, "w").write("object:" + source)
"""

STUB_LINKER = """
import sys
assert sys.argv[1] == "--output-filename"
output, inputs = sys.argv[2], sys.argv[3:]
open(output, "w").write("\\n".join(inputs))
"""

STUB_EMULATOR = """
import sys
print("linked:", len(open(sys.argv[1]).read().splitlines()))
"""


def _write_stub(directory: Path, name: str, body: str) -> None:
    path = directory / f"{name}.bin"
    path.write_text(f"#!{sys.executable}\n{body}")
    path.chmod(0o755)


@pytest.fixture
def binary_directory(tmp_path: Path) -> Path:
    directory = tmp_path / "bin"
    directory.mkdir()
    _write_stub(directory, "name-as", STUB_ASSEMBLER)
    _write_stub(directory, "name-ld", STUB_LINKER)
    _write_stub(directory, "name-emu", STUB_EMULATOR)
    return directory


def _coordinator(binary_directory: Path, host: InMemoryHost) -> PipelineCoordinator:
    invoker = ToolInvoker(
        StatusSink(host),
        host=Host(operating_system="Linux", architecture="AMD64"),
        timeout=30,
    )
    return PipelineCoordinator(invoker, host, binary_directory)


def test_pipeline_with_processes(binary_directory: Path, tmp_path: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()
    source = project / "fib.asm"
    source.write_text("main: nop\n")
    host = InMemoryHost()

    outcome = asyncio.run(_coordinator(binary_directory, host).run_pipeline(source))

    assert isinstance(outcome, Success)
    assert (project / "fib.o").exists()
    assert (project / "fib").exists()
    assert host.channels["NAME-EMU"].text == "linked: 1\n"


def test_pipeline_with_processes_stderr_failure(
    binary_directory: Path,
    tmp_path: Path,
) -> None:
    source = tmp_path / "fib.asm"
    source.write_text("bad instruction\n")
    host = InMemoryHost()

    outcome = asyncio.run(_coordinator(binary_directory, host).run_pipeline(source))

    assert isinstance(outcome, Failure)
    assert outcome.reason == "syntax error line 3"
    assert host.channels["NAME-AS"].text == "syntax error line 3"
    assert "NAME-LD" not in host.channels
    assert not (tmp_path / "fib").exists()


def test_pipeline_with_processes_relative_binary_directory(
    binary_directory: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # Tools are spawned inside `project/`, binaries are relative to current directory
    monkeypatch.chdir(tmp_path)
    project = tmp_path / "project"
    project.mkdir()
    source = project / "fib.asm"
    source.write_text("main: nop\n")
    host = InMemoryHost()

    relative = binary_directory.relative_to(tmp_path)
    outcome = asyncio.run(_coordinator(relative, host).run_pipeline(source))

    assert isinstance(outcome, Success)
    assert host.channels["NAME-EMU"].text == "linked: 1\n"
