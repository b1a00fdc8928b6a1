"""Tests for the catalog store."""

import io
import logging

import pytest

from media_catalog.domain.catalog import CatalogStore
from media_catalog.domain.entities import MediaItem
from media_catalog.domain.value_objects import MediaType
from media_catalog.exceptions import CatalogIOError, ParseError, ValidationError


SCENARIO_TEXT = "1 Orwell 1984 1949 0\n2 Nat Geo 2020 1\n"


@pytest.fixture
def orwell():
    return MediaItem(MediaType.BOOK, "Orwell", "1984", 1949, False)


@pytest.fixture
def nat_geo():
    return MediaItem(MediaType.MAGAZINE, "Nat", "Geo", 2020, True)


@pytest.fixture
def store(orwell, nat_geo):
    """Create a store holding the two scenario items."""
    catalog = CatalogStore()
    catalog.add(orwell)
    catalog.add(nat_geo)
    return catalog


class TestListing:
    """Test adding and listing items."""

    def test_empty_store(self):
        catalog = CatalogStore()
        assert len(catalog) == 0
        assert list(catalog.list_all()) == []
        assert list(catalog.list_available()) == []
        assert list(catalog.list_borrowed()) == []

    def test_add_appends_last(self, store):
        new_item = MediaItem(MediaType.CASSETTE, "Queen", "Jazz", 1978, True)
        before = list(store.list_all())

        store.add(new_item)

        after = list(store.list_all())
        assert len(after) == len(before) + 1
        assert after[-1] is new_item
        assert after[:-1] == before

    def test_duplicates_allowed(self, orwell):
        catalog = CatalogStore()
        catalog.add(orwell)
        catalog.add(orwell)
        assert len(catalog) == 2

    def test_list_all_restartable(self, store):
        """Listing twice without mutation gives the same sequence."""
        assert list(store.list_all()) == list(store.list_all())

    def test_list_all_is_lazy(self, store):
        iterator = store.list_all()
        assert next(iterator).author == "Orwell"
        assert next(iterator).author == "Nat"
        with pytest.raises(StopIteration):
            next(iterator)

    def test_iter(self, store, orwell, nat_geo):
        assert list(store) == [orwell, nat_geo]

    def test_filters(self, store, orwell, nat_geo):
        assert list(store.list_available()) == [nat_geo]
        assert list(store.list_borrowed()) == [orwell]
        assert store.count_available() == 1
        assert store.count_borrowed() == 1

    def test_filters_preserve_order(self):
        items = [
            MediaItem(MediaType.BOOK, f"a{i}", f"t{i}", 1900 + i, i % 2 == 0)
            for i in range(6)
        ]
        catalog = CatalogStore(items)

        assert [i.author for i in catalog.list_available()] == ["a0", "a2", "a4"]
        assert [i.author for i in catalog.list_borrowed()] == ["a1", "a3", "a5"]

    def test_replace_all(self, store, orwell):
        replacement = [MediaItem(MediaType.CD_ROM, "x", "y", 2001, True), orwell]
        store.replace_all(iter(replacement))
        assert list(store.list_all()) == replacement


class TestSave:
    """Test writing the catalog."""

    def test_save_to_stream(self, store):
        sink = io.StringIO()
        store.save_to(sink)
        assert sink.getvalue() == SCENARIO_TEXT

    def test_save_to_path(self, store, tmp_path):
        path = tmp_path / "library_data.txt"
        store.save_to(path)
        assert path.read_text() == SCENARIO_TEXT

    def test_save_to_str_path(self, store, tmp_path):
        path = tmp_path / "library_data.txt"
        store.save_to(str(path))
        assert path.read_text() == SCENARIO_TEXT

    def test_save_empty_store(self, tmp_path):
        path = tmp_path / "empty.txt"
        CatalogStore().save_to(path)
        assert path.read_text() == ""

    def test_save_to_missing_directory(self, store, tmp_path, orwell, nat_geo):
        with pytest.raises(CatalogIOError, match="Failed to write the catalog file"):
            store.save_to(tmp_path / "missing" / "library_data.txt")
        assert list(store.list_all()) == [orwell, nat_geo]

    def test_save_to_closed_stream(self, store):
        sink = io.StringIO()
        sink.close()
        with pytest.raises(CatalogIOError):
            store.save_to(sink)

    def test_catalog_io_error_is_os_error(self, store, tmp_path):
        with pytest.raises(OSError):
            store.save_to(tmp_path)

    def test_save_rejects_empty_fields_before_writing(self, store, tmp_path):
        """An item whose line could not be read back leaves the file alone."""
        path = tmp_path / "library_data.txt"
        store.save_to(path)
        store.add(MediaItem())

        with pytest.raises(ValidationError, match="cannot be saved"):
            store.save_to(path)

        assert path.read_text() == SCENARIO_TEXT
        assert len(store) == 3

    def test_save_rejects_multi_word_author(self):
        catalog = CatalogStore([MediaItem(MediaType.BOOK, "Orwell", "1984", 1949, False)])
        catalog.add(MediaItem(MediaType.BOOK, "George Orwell", "1984", 1949, False))
        sink = io.StringIO()

        with pytest.raises(ValidationError):
            catalog.save_to(sink)
        assert sink.getvalue() == ""

    def test_save_logs_count(self, store, caplog):
        with caplog.at_level(logging.INFO, logger="media_catalog.domain.catalog"):
            store.save_to(io.StringIO())
        assert "Saved 2 items" in caplog.text


class TestLoad:
    """Test reading the catalog."""

    def test_load_scenario(self, orwell, nat_geo):
        catalog = CatalogStore()
        catalog.load_from(io.StringIO(SCENARIO_TEXT))
        assert list(catalog.list_all()) == [orwell, nat_geo]

    def test_load_replaces_existing(self, store):
        store.load_from(io.StringIO("5 Queen Jazz 1978 1\n"))
        items = list(store.list_all())
        assert len(items) == 1
        assert items[0].category is MediaType.CASSETTE

    def test_save_then_load_path(self, store, tmp_path, orwell, nat_geo):
        path = tmp_path / "library_data.txt"
        store.save_to(path)

        reloaded = CatalogStore()
        reloaded.load_from(path)
        assert list(reloaded.list_all()) == [orwell, nat_geo]

    def test_load_skips_blank_lines(self, orwell, nat_geo):
        catalog = CatalogStore()
        catalog.load_from(io.StringIO("\n1 Orwell 1984 1949 0\n\n   \n2 Nat Geo 2020 1"))
        assert list(catalog.list_all()) == [orwell, nat_geo]

    def test_load_empty_source(self, store):
        store.load_from(io.StringIO(""))
        assert len(store) == 0

    def test_malformed_line_keeps_contents(self, store, orwell, nat_geo):
        source = io.StringIO("5 Queen Jazz 1978 1\nabc xx yy 1 1\n")

        with pytest.raises(ParseError) as exc_info:
            store.load_from(source)

        assert exc_info.value.line_number == 2
        assert exc_info.value.line == "abc xx yy 1 1"
        assert "line 2" in str(exc_info.value)
        assert list(store.list_all()) == [orwell, nat_geo]

    def test_missing_file_keeps_contents(self, store, tmp_path, orwell, nat_geo):
        with pytest.raises(CatalogIOError, match="Failed to read the catalog file"):
            store.load_from(tmp_path / "nope.txt")
        assert list(store.list_all()) == [orwell, nat_geo]

    def test_undecodable_file(self, store, tmp_path):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\xfa 1 2")
        with pytest.raises(CatalogIOError):
            store.load_from(path)
        assert len(store) == 2

    def test_load_logs_malformed_line(self, caplog):
        catalog = CatalogStore()
        with caplog.at_level(logging.ERROR, logger="media_catalog.domain.catalog"):
            with pytest.raises(ParseError):
                catalog.load_from(io.StringIO("1 a b c 1\n"))
        assert "Malformed line 1" in caplog.text
