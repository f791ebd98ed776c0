"""
Manifest invariants over a larger build graph.
"""

import hashlib
from collections import Counter

import pytest

from entrypoint_lister import LocalOutputDirectory, build_manifest
from entrypoint_lister.components.hashing import hex_from_sri


class CountingDirectory(LocalOutputDirectory):
    def __init__(self, base_path):
        super().__init__(base_path)
        self.reads = Counter()

    def read_bytes(self, name):
        self.reads[name] += 1
        return super().read_bytes(name)


@pytest.fixture
def graph():
    return {
        "home": [["runtime.js", "vendors.js"], ["home.js", "home.css", "home.js.map"]],
        "blog": [["runtime.js", "vendors.js"], ["blog.js", "blog.css"]],
        "admin": [["runtime.js"], ["admin.js", "vendors.js", "fonts/icons.woff2"]],
    }


@pytest.fixture
def manifest_and_directory(graph, write_outputs, make_event, dist):
    files = {name for chunks in graph.values() for chunk in chunks for name in chunk}
    write_outputs({name: name.encode() * 3 for name in files})
    # Compressed siblings for some files only
    write_outputs({"vendors.js.br": b"vb", "vendors.js.gz": b"vg", "home.css.gz": b"hg"})

    directory = CountingDirectory(dist)
    return build_manifest(make_event(graph), directory=directory), directory


def test_each_distinct_file_read_once(manifest_and_directory, graph):
    manifest, directory = manifest_and_directory
    base_reads = {name: n for name, n in directory.reads.items() if name in manifest.files}

    assert set(base_reads) == set(manifest.files)
    assert set(base_reads.values()) == {1}


def test_listed_files_have_records(manifest_and_directory):
    manifest, _ = manifest_and_directory

    for record in manifest.entrypoints.values():
        for name in record.scripts + record.stylesheets:
            assert name in manifest.files


def test_absent_variants_omitted(manifest_and_directory):
    manifest, _ = manifest_and_directory

    for name, record in manifest.files.items():
        assert None not in record.variants.values()
        assert "identity" in record.variants
        for variant in record.variants.values():
            assert variant.file.startswith(name)

    assert list(manifest.files["vendors.js"].variants) == ["identity", "br", "gzip"]
    assert list(manifest.files["home.css"].variants) == ["identity", "gzip"]
    assert list(manifest.files["blog.css"].variants) == ["identity"]


def test_identity_hash_matches_sri(manifest_and_directory):
    manifest, _ = manifest_and_directory

    for record in manifest.files.values():
        assert record.identity.hash == hex_from_sri(record.sri_hash)


def test_variant_hashes_are_their_own(manifest_and_directory):
    manifest, _ = manifest_and_directory

    vendors = manifest.files["vendors.js"].variants
    assert vendors["br"].hash == hashlib.sha512(b"vb").hexdigest()
    assert vendors["gzip"].hash == hashlib.sha512(b"vg").hexdigest()
    assert vendors["br"].hash != vendors["identity"].hash


def test_entrypoint_order_follows_graph(manifest_and_directory, graph):
    manifest, _ = manifest_and_directory

    assert list(manifest.entrypoints) == list(graph)
    assert manifest.entrypoints["admin"].scripts == ["runtime.js", "admin.js", "vendors.js"]
    assert manifest.entrypoints["admin"].stylesheets == []
    assert manifest.files["fonts/icons.woff2"].content_type == "application/octet-stream"
