"""Tests for infrastructure.i18n.loader module."""

import pytest

from infrastructure.i18n.loader import YAMLCatalogLoader

pytestmark = pytest.mark.unit


class TestYAMLCatalogLoader:
    """Tests for YAMLCatalogLoader."""

    def test_missing_directory_raises(self, tmp_path):
        """The loader refuses a directory that does not exist."""
        with pytest.raises(ValueError):
            YAMLCatalogLoader(tmp_path / "missing")

    def test_load_catalog(self, yaml_loader):
        """load() parses <domain>.<locale>.yml."""
        catalog = yaml_loader.load("posts", "fr_FR")

        assert catalog is not None
        assert catalog.domain == "posts"
        assert catalog.locale == "fr_FR"
        assert catalog.get_message("Post.title") == "Titre de l'article"
        assert catalog.loaded_at is not None

    def test_load_plural_and_context_entries(self, yaml_loader):
        """Lists and context maps are kept as such."""
        catalog = yaml_loader.load("default", "fr_FR")

        assert catalog.get_message("comment") == ["commentaire", "commentaires"]
        assert catalog.get_message("Save") == "Enregistrer"
        assert catalog.get_message("Save", "menu") == "Sauvegarder"

    def test_load_missing_catalog_returns_none(self, yaml_loader):
        """A domain without a file for the locale has no catalog."""
        assert yaml_loader.load("comments", "fr_FR") is None
        assert yaml_loader.load("posts_index", "en_US") is None

    def test_invalid_entries_are_skipped(self, temp_translations_dir):
        """Entries that are not messages are skipped."""
        (temp_translations_dir / "broken.fr_FR.yml").write_text(
            "ok: Bien\ncount: 3\nempty: []\nnested:\n  a:\n    b: c\n",
            encoding="utf-8",
        )
        catalog = YAMLCatalogLoader(temp_translations_dir).load("broken", "fr_FR")

        assert catalog.messages == {"ok": "Bien"}

    def test_empty_file_gives_empty_catalog(self, temp_translations_dir):
        """An empty file is a catalog without messages."""
        (temp_translations_dir / "empty.fr_FR.yml").write_text("", encoding="utf-8")
        catalog = YAMLCatalogLoader(temp_translations_dir).load("empty", "fr_FR")

        assert catalog is not None
        assert catalog.messages == {}

    def test_invalid_yaml_raises(self, temp_translations_dir):
        """A file that is not valid YAML raises ValueError."""
        (temp_translations_dir / "bad.fr_FR.yml").write_text(
            "key: [unclosed", encoding="utf-8"
        )
        loader = YAMLCatalogLoader(temp_translations_dir)

        with pytest.raises(ValueError):
            loader.load("bad", "fr_FR")

    def test_cache_returns_same_catalog(self, yaml_loader_with_cache):
        """With caching, repeated loads return the same catalog object."""
        first = yaml_loader_with_cache.load("posts", "fr_FR")
        second = yaml_loader_with_cache.load("posts", "fr_FR")
        assert first is second

    def test_without_cache_reads_every_time(self, yaml_loader):
        """Without caching, each load parses the file again."""
        first = yaml_loader.load("posts", "fr_FR")
        second = yaml_loader.load("posts", "fr_FR")
        assert first is not second
        assert yaml_loader.cache == {}


    def test_cache_remembers_missing_catalogs(
        self, yaml_loader_with_cache, temp_translations_dir
    ):
        """A catalog missing on first load stays missing for the cached loader."""
        assert yaml_loader_with_cache.load("comments", "fr_FR") is None
        (temp_translations_dir / "comments.fr_FR.yml").write_text(
            "Comment: Commentaire\n", encoding="utf-8"
        )

        assert yaml_loader_with_cache.load("comments", "fr_FR") is None
        assert yaml_loader_with_cache.cache[("comments", "fr_FR")] is None
