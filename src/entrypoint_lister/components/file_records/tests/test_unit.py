"""
File records component unit tests.
"""

from __future__ import annotations

import hashlib
from collections import Counter

import pytest

from entrypoint_lister.components.content_types import ContentTypeClassifier
from entrypoint_lister.components.file_records import build_file_record
from entrypoint_lister.components.hashing import hex_from_sri, sri_from_hex

MAIN_JS = b"function main() { return 42; }"


class MockOutputDirectory:
    """In-memory output directory for testing."""

    def __init__(self, files: dict[str, bytes]) -> None:
        self.files = dict(files)
        self.reads: Counter[str] = Counter()

    def size(self, name: str) -> int:
        if name not in self.files:
            raise FileNotFoundError(name)
        return len(self.files[name])

    def read_bytes(self, name: str) -> bytes:
        self.reads[name] += 1
        if name not in self.files:
            raise FileNotFoundError(name)
        return self.files[name]


class VanishingDirectory(MockOutputDirectory):
    """Readable once, then gone before it can be stat-ed."""

    def size(self, name: str) -> int:
        raise FileNotFoundError(name)


@pytest.fixture
def classifier() -> ContentTypeClassifier:
    return ContentTypeClassifier()


class TestBuildFileRecord:
    """Test building a single file record."""

    def test_identity_and_present_variants(self, classifier: ContentTypeClassifier) -> None:
        directory = MockOutputDirectory({"main.js": MAIN_JS, "main.js.br": b"br"})

        record = build_file_record("main.js", directory=directory, classifier=classifier)

        assert record.content_type == "application/javascript"
        assert list(record.variants) == ["identity", "br"]
        assert record.variants["br"].file == "main.js.br"
        assert record.variants["br"].size == 2
        assert record.variants["br"].hash == hashlib.sha512(b"br").hexdigest()

    def test_sri_hash(self, classifier: ContentTypeClassifier) -> None:
        directory = MockOutputDirectory({"main.js": MAIN_JS})

        record = build_file_record("main.js", directory=directory, classifier=classifier)

        expected_hex = hashlib.sha512(MAIN_JS).hexdigest()
        assert record.sri_hash == sri_from_hex(expected_hex)
        assert record.sri_hash.startswith("sha512-")

    def test_identity_reuses_digest(self, classifier: ContentTypeClassifier) -> None:
        directory = MockOutputDirectory({"main.js": MAIN_JS})

        record = build_file_record("main.js", directory=directory, classifier=classifier)

        assert record.identity.file == "main.js"
        assert record.identity.size == len(MAIN_JS)
        assert record.identity.hash == hex_from_sri(record.sri_hash)
        assert directory.reads["main.js"] == 1

    def test_hasher_called_once_per_present_file(self, classifier: ContentTypeClassifier) -> None:
        calls: list[bytes] = []

        def counting_hasher(data: bytes) -> str:
            calls.append(data)
            return hashlib.sha512(data).hexdigest()

        directory = MockOutputDirectory(
            {"main.js": MAIN_JS, "main.js.br": b"br", "main.js.gz": b"gz"}
        )
        build_file_record(
            "main.js", directory=directory, classifier=classifier, hasher=counting_hasher
        )

        assert calls == [MAIN_JS, b"br", b"gz"]

    def test_variant_order_follows_configuration(self, classifier: ContentTypeClassifier) -> None:
        directory = MockOutputDirectory(
            {"app.css": b"body{}", "app.css.br": b"1", "app.css.gz": b"2"}
        )

        record = build_file_record(
            "app.css",
            directory=directory,
            classifier=classifier,
            variants={"gzip": ".gz", "br": ".br"},
        )

        assert list(record.variants) == ["identity", "gzip", "br"]

    def test_unclassified_file(self, classifier: ContentTypeClassifier) -> None:
        directory = MockOutputDirectory({"fonts/a.woff2": b"\x00\x01"})

        record = build_file_record("fonts/a.woff2", directory=directory, classifier=classifier)

        assert record.content_type == "application/octet-stream"
        assert list(record.variants) == ["identity"]

    def test_known_content_type_skips_classifier(self) -> None:
        class FailingClassifier(ContentTypeClassifier):
            def classify(self, filename: str) -> str:
                raise AssertionError(f"classified {filename} again")

        directory = MockOutputDirectory({"main.js": MAIN_JS})

        record = build_file_record(
            "main.js",
            directory=directory,
            classifier=FailingClassifier(),
            content_type="application/javascript",
        )

        assert record.content_type == "application/javascript"

    def test_missing_base_file_raises(self, classifier: ContentTypeClassifier) -> None:
        directory = MockOutputDirectory({"main.js.br": b"orphan"})

        with pytest.raises(FileNotFoundError):
            build_file_record("main.js", directory=directory, classifier=classifier)

    def test_base_file_vanishing_raises(self, classifier: ContentTypeClassifier) -> None:
        directory = VanishingDirectory({"main.js": MAIN_JS})

        with pytest.raises(FileNotFoundError, match="main.js"):
            build_file_record("main.js", directory=directory, classifier=classifier)

    def test_to_dict_key_order(self, classifier: ContentTypeClassifier) -> None:
        directory = MockOutputDirectory({"main.js": MAIN_JS})

        data = build_file_record("main.js", directory=directory, classifier=classifier).to_dict()

        assert list(data) == ["contentType", "sriHash", "variants"]
        assert list(data["variants"]["identity"]) == ["file", "size", "hash"]
