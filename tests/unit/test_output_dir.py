import pytest

from entrypoint_lister.adapters.fs.output_dir import LocalOutputDirectory


@pytest.fixture
def directory(tmp_path):
    (tmp_path / "main.js").write_bytes(b"hello world")
    (tmp_path / "css").mkdir()
    (tmp_path / "css" / "app.css").write_bytes(b"body{}")
    return LocalOutputDirectory(tmp_path)


def test_size_and_read(directory):
    assert directory.size("main.js") == 11
    assert directory.read_bytes("main.js") == b"hello world"


def test_nested_names(directory):
    assert directory.read_bytes("css/app.css") == b"body{}"


def test_missing_file_raises(directory):
    with pytest.raises(FileNotFoundError):
        directory.size("main.js.br")

    with pytest.raises(FileNotFoundError):
        directory.read_bytes("main.js.br")


def test_directory_is_not_readable(directory):
    """A directory where a file is expected is a read error, not absence."""
    with pytest.raises(IsADirectoryError):
        directory.read_bytes("css")
