"""
Pytest configuration and shared fixtures for turboshell tests.

This module provides reusable test fixtures for:
- Captured output streams
- A launcher that records commands instead of forking
- Builtin registries, processes and shells wired to those fixtures
"""

import io
import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

from turboshell.launcher import ExitStatus, ProcessLauncher

PROJECT_ROOT = Path(__file__).resolve().parent.parent


# ============================================================================
# Recording Launcher
# ============================================================================

class RecordingLauncher(ProcessLauncher):
    """
    Launcher that records argv lists instead of spawning programs.

    Every spawn reports a clean exit with the configured status.
    """

    def __init__(self, exit_code: int = 0):
        self.calls: List[List[str]] = []
        self.exit_code = exit_code

    def spawn(self, argv: List[str]) -> ExitStatus:
        self.calls.append(list(argv))
        return ExitStatus(pid=4242, exit_code=self.exit_code)


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def capture_output():
    """
    Provides in-memory streams for capturing command output.

    Returns:
        tuple: (stdout, stderr) streams backed by BytesIO
    """
    from turboshell.streams import OutputStream, ErrorStream

    return OutputStream(io.BytesIO()), ErrorStream(io.BytesIO())


@pytest.fixture
def registry():
    """Provides the standard builtin registry."""
    from turboshell.builtins import build_builtin_registry

    return build_builtin_registry()


@pytest.fixture
def recording_launcher():
    """Provides a launcher that never forks."""
    return RecordingLauncher()


@pytest.fixture
def make_process(capture_output, registry):
    """
    Provides a factory for Process instances with captured output.

    Example:
        def test_cd(make_process):
            process = make_process('cd', '/tmp')
            assert process.execute() is True
    """
    from turboshell.config import ShellConfig
    from turboshell.context import CommandContext
    from turboshell.process import Process

    stdout, stderr = capture_output
    context = CommandContext.from_config(ShellConfig(), registry)

    def factory(*argv):
        return Process.from_argv(
            list(argv),
            stdout=stdout,
            stderr=stderr,
            executor=registry.get(argv[0]),
            context=context,
        )

    return factory


@pytest.fixture
def make_shell(capture_output, registry, recording_launcher):
    """
    Provides a factory for Shell instances reading from a byte string.

    The shell uses the recording launcher unless another one is passed.

    Example:
        def test_exit(make_shell):
            shell = make_shell(b'exit\\n')
            assert shell.run() == 0
    """
    from turboshell.shell import Shell
    from turboshell.streams import InputStream

    stdout, stderr = capture_output

    def factory(data: bytes = b'', launcher=None):
        return Shell(
            builtins=registry,
            launcher=launcher or recording_launcher,
            stdin=InputStream.from_bytes(data),
            stdout=stdout,
            stderr=stderr,
        )

    return factory


@pytest.fixture
def run_tsh():
    """
    Runs `python -m turboshell` as a subprocess with the given input.

    Returns:
        callable(input_text, *args, cwd=None) -> subprocess.CompletedProcess
    """
    env = dict(os.environ)
    env['PYTHONPATH'] = os.pathsep.join(
        p for p in (str(PROJECT_ROOT), env.get('PYTHONPATH')) if p
    )
    env.pop('TSH_LOG_LEVEL', None)

    def runner(input_text: str, *args, cwd=None):
        return subprocess.run(
            [sys.executable, '-m', 'turboshell', *args],
            input=input_text,
            capture_output=True,
            text=True,
            cwd=cwd,
            env=env,
            timeout=30,
        )

    return runner


@pytest.fixture
def restore_cwd():
    """Restores the working directory after a test that runs `cd`."""
    original = os.getcwd()
    yield original
    os.chdir(original)


# ============================================================================
# Helper Functions
# ============================================================================

def get_text(stream) -> str:
    """Get captured stream content as string."""
    return stream.get_value().decode('utf-8', errors='replace')


pytest.get_text = get_text
