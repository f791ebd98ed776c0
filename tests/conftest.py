from collections.abc import Callable
from pathlib import Path

import pytest

from entrypoint_lister.core.entities import BuildCompletedEvent, Chunk, EntrypointChunks


@pytest.fixture
def dist(tmp_path: Path) -> Path:
    """Empty build output directory."""
    path = tmp_path / "dist"
    path.mkdir()
    return path


@pytest.fixture
def write_outputs(dist: Path) -> Callable[..., Path]:
    """Write files into the output directory: write_outputs({"main.js": b"..."})."""

    def _write(files: dict[str, bytes]) -> Path:
        for name, data in files.items():
            target = dist / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        return dist

    return _write


@pytest.fixture
def make_event(dist: Path) -> Callable[..., BuildCompletedEvent]:
    """
    Build a BuildCompletedEvent for the output directory.

    make_event({"main": [["main.js", "main.css"]]}) -> one entry point, one chunk.
    """

    def _make(graph: dict[str, list[list[str]]]) -> BuildCompletedEvent:
        return BuildCompletedEvent(
            output_path=dist,
            entrypoints=[
                EntrypointChunks(name=name, chunks=[Chunk(files=list(files)) for files in chunks])
                for name, chunks in graph.items()
            ],
        )

    return _make
