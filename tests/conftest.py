"""Shared pytest fixtures and configuration for the rds-exec test suite.

Guidelines
----------
* No test starts the real AWS CLI or touches the network.
* Process creation is faked at the ``ProcessLauncher`` boundary.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

import pytest


class FakeStream:
    """Byte stream yielding pre-recorded chunks, then EOF."""

    def __init__(self, *chunks: bytes) -> None:
        self._chunks: list[bytes] = list(chunks)
        self.read_sizes: list[int] = []

    async def read(self, n: int = -1) -> bytes:
        self.read_sizes.append(n)
        if not self._chunks:
            return b""
        return self._chunks.pop(0)


class FakeProcess:
    """Finished child process with canned output."""

    def __init__(
        self,
        *,
        stdout: Sequence[bytes] = (),
        stderr: Sequence[bytes] = (),
        returncode: int = 0,
    ) -> None:
        self.stdout = FakeStream(*stdout)
        self.stderr = FakeStream(*stderr)
        self.returncode = returncode

    async def wait(self) -> int:
        return self.returncode


class FakeLauncher:
    """Records launch calls; returns *process* or raises *error*."""

    def __init__(
        self,
        process: FakeProcess | None = None,
        *,
        error: BaseException | None = None,
    ) -> None:
        self.process = process or FakeProcess()
        self.error = error
        self.calls: list[tuple[str, list[str]]] = []

    async def launch(self, program: str, args: Sequence[str]) -> FakeProcess:
        self.calls.append((program, list(args)))
        if self.error is not None:
            raise self.error
        return self.process


SAMPLE_ENVELOPE: dict[str, Any] = {
    "records": [
        [{"longValue": 1}, {"stringValue": "Alice"}],
        [{"longValue": 2}, {"stringValue": "Bob"}],
    ],
    "columnMetadata": [{"name": "id"}, {"name": "name"}],
}


@pytest.fixture
def sample_stdout() -> bytes:
    return json.dumps(SAMPLE_ENVELOPE).encode()


@pytest.fixture
def make_launcher():
    """Factory: ``make_launcher(stdout=..., stderr=..., returncode=...)``."""

    def _make(
        *,
        stdout: bytes | Sequence[bytes] = b"",
        stderr: bytes | Sequence[bytes] = b"",
        returncode: int = 0,
    ) -> FakeLauncher:
        out = [stdout] if isinstance(stdout, bytes) else list(stdout)
        err = [stderr] if isinstance(stderr, bytes) else list(stderr)
        return FakeLauncher(FakeProcess(stdout=out, stderr=err, returncode=returncode))

    return _make
