"""Tests for the file system and in-memory stores."""

import json

import pytest

from led_merger.stores import (
    ConfigurationStore,
    DocumentNotFoundError,
    FileSystemStore,
    HttpStore,
    InvalidDocumentError,
    MemoryStore,
    StoreReadError,
    StoreWriteError,
)


class TestStoreProtocol:
    """Tests for the ConfigurationStore interface."""

    def test_implementations_satisfy_protocol(self):
        """All stores provide load and save."""
        assert isinstance(FileSystemStore(), ConfigurationStore)
        assert isinstance(MemoryStore(), ConfigurationStore)
        assert isinstance(HttpStore({"base_url": "https://example.com"}), ConfigurationStore)

    def test_plain_object_does_not_satisfy_protocol(self):
        """Objects without load/save are not stores."""
        assert not isinstance(object(), ConfigurationStore)


class TestFileSystemStoreLoad:
    """Tests for FileSystemStore.load."""

    def test_load_relative_to_base_dir(self, config_dir):
        """Relative locations resolve against base_dir."""
        config = FileSystemStore(config_dir).load("base.json")

        assert config.slots == [0, 1, 5]

    def test_load_absolute_path(self, config_dir):
        """Absolute locations are used as given."""
        config = FileSystemStore().load(str(config_dir / "source.json"))

        assert config.slots == [0, 2]

    def test_load_missing_file(self, tmp_path):
        """Missing files raise DocumentNotFoundError."""
        with pytest.raises(DocumentNotFoundError, match="not found"):
            FileSystemStore(tmp_path).load("missing.json")

    def test_load_directory(self, tmp_path):
        """A directory is not a document."""
        (tmp_path / "folder.json").mkdir()

        with pytest.raises(DocumentNotFoundError):
            FileSystemStore(tmp_path).load("folder.json")

    def test_load_malformed_json(self, tmp_path):
        """Malformed JSON raises InvalidDocumentError."""
        (tmp_path / "broken.json").write_text("{\"page_num\": ")

        with pytest.raises(InvalidDocumentError, match="Failed to parse JSON"):
            FileSystemStore(tmp_path).load("broken.json")

    def test_load_invalid_document(self, tmp_path, base_record):
        """Schema violations raise InvalidDocumentError with details."""
        base_record["page_data"][0]["frames"]["frame_data"][0]["frame_index"] = "zero"
        (tmp_path / "bad.json").write_text(json.dumps(base_record))

        with pytest.raises(InvalidDocumentError) as exc_info:
            FileSystemStore(tmp_path).load("bad.json")

        assert exc_info.value.errors
        assert "frame_index" in exc_info.value.errors[0]

    def test_load_undecodable_bytes(self, tmp_path):
        """Files that are not valid text raise StoreReadError."""
        (tmp_path / "binary.json").write_bytes(b"\xff\xfe\x00\x81")

        with pytest.raises(StoreReadError):
            FileSystemStore(tmp_path).load("binary.json")


class TestFileSystemStoreSave:
    """Tests for FileSystemStore.save."""

    def test_save_pretty_json(self, tmp_path, base_config):
        """Saved files are indented JSON in the wire layout."""
        FileSystemStore(tmp_path).save(base_config, "out.json")

        text = (tmp_path / "out.json").read_text(encoding="utf-8")
        data = json.loads(text)

        assert text.startswith("{\n  \"product_info\"")
        assert data["page_data"][0]["//"] == "base slot 0"
        assert data["Fn_key"] == {"layer": 2}

    def test_save_then_load(self, tmp_path, base_config):
        """A saved document loads back equal."""
        store = FileSystemStore(tmp_path)

        store.save(base_config, "out.json")

        assert store.load("out.json") == base_config

    def test_save_is_diff_minimal(self, config_dir, base_record):
        """Loading and saving an unchanged file reproduces its content."""
        store = FileSystemStore(config_dir, indent=2)

        store.save(store.load("base.json"), "copy.json")

        assert json.loads((config_dir / "copy.json").read_text()) == base_record

    def test_save_custom_indent(self, tmp_path, base_config):
        """indent controls the output layout."""
        FileSystemStore(tmp_path, indent=4).save(base_config, "out.json")

        assert (tmp_path / "out.json").read_text().startswith("{\n    \"product_info\"")

    def test_save_to_missing_directory(self, tmp_path, base_config):
        """Write failures raise StoreWriteError."""
        with pytest.raises(StoreWriteError):
            FileSystemStore(tmp_path).save(base_config, "no/such/dir/out.json")


class TestMemoryStore:
    """Tests for MemoryStore."""

    def test_empty_store(self):
        """A new store is empty."""
        store = MemoryStore()

        assert len(store) == 0
        assert store.locations == []

    def test_initial_documents(self, base_config):
        """Documents passed at construction are stored."""
        store = MemoryStore({"base": base_config})

        assert "base" in store
        assert store.load("base") == base_config

    def test_load_missing(self):
        """Unknown locations raise DocumentNotFoundError."""
        with pytest.raises(DocumentNotFoundError, match="nope"):
            MemoryStore().load("nope")

    def test_load_returns_copy(self, base_config):
        """Changing a loaded document does not change the stored one."""
        store = MemoryStore({"base": base_config})

        loaded = store.load("base")
        loaded.pages.clear()

        assert len(store.load("base").pages) == 3

    def test_save_stores_copy(self, base_config):
        """Changing a document after saving does not change the stored one."""
        store = MemoryStore()
        store.save(base_config, "base")

        base_config.pages[0].lightness = 1

        assert store.load("base").pages[0].lightness == 100

    def test_save_replaces(self, base_config, source_config):
        """Saving to an existing location replaces the document."""
        store = MemoryStore({"doc": base_config})

        store.save(source_config, "doc")

        assert store.load("doc") == source_config
        assert len(store) == 1
