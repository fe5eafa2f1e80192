"""Tests for infrastructure.i18n.catalog module."""

import pytest

from infrastructure.i18n.models import MessageVariant

pytestmark = pytest.mark.unit


class TestYAMLCatalogResolver:
    """Tests for YAMLCatalogResolver."""

    def test_translate_in_domain(self, resolver):
        """A domain with the key returns its message."""
        assert resolver.translate("Post.title", "fr_FR", domain="posts") == (
            "Titre de l'article"
        )
        assert resolver.translate("Post.title", "fr_FR", domain="posts_index") == (
            "Titre"
        )

    def test_miss_returns_key(self, resolver):
        """A domain without the key returns the key unchanged."""
        assert resolver.translate("Post.body", "fr_FR", domain="posts") == "Post.body"

    def test_missing_domain_returns_key(self, resolver):
        """A domain without a catalog returns the key unchanged."""
        assert resolver.translate("Post.title", "fr_FR", domain="comments") == (
            "Post.title"
        )

    def test_default_resolution_uses_default_domain(self, resolver):
        """Without a domain the default domain is consulted."""
        assert resolver.translate("Hello {name}", "fr_FR") == "Bonjour {name}"
        assert resolver.translate("Post.title", "fr_FR") == "Post.title"

    def test_locale_selects_catalog(self, resolver):
        """The locale selects which catalog file is read."""
        assert resolver.translate("Post.title", "en_US", domain="posts") == (
            "Post title"
        )

    def test_plural_forms(self, resolver):
        """The plural rule of the locale picks the form."""
        for count, expected in [(0, "commentaire"), (1, "commentaire"), (2, "commentaires")]:
            variant = MessageVariant(count=count, singular="comment")
            assert resolver.translate("comments", "fr_FR", "default", variant) == expected

    def test_plural_without_count_uses_first_form(self, resolver):
        """Without a count the first form is returned."""
        assert resolver.translate("comment", "fr_FR", "default") == "commentaire"

    def test_context(self, resolver):
        """Context maps answer contextual and context-less lookups."""
        assert resolver.translate("Save", "fr_FR", "default") == "Enregistrer"
        variant = MessageVariant(context="menu")
        assert resolver.translate("Save", "fr_FR", "default", variant) == "Sauvegarder"

    def test_unknown_context_is_a_miss(self, resolver):
        """An unknown context returns the key."""
        variant = MessageVariant(context="toolbar")
        assert resolver.translate("Save", "fr_FR", "default", variant) == "Save"

    def test_untranslated_plural_in_domain_returns_key(self, resolver):
        """A per-domain miss on a plural returns the plural key."""
        variant = MessageVariant(count=1, singular="like")
        assert resolver.translate("likes", "fr_FR", "posts", variant) == "likes"

    def test_untranslated_plural_default_resolution(self, resolver):
        """The default resolution falls back to the singular for one item."""
        one = MessageVariant(count=1, singular="like")
        many = MessageVariant(count=3, singular="like")
        assert resolver.translate("likes", "fr_FR", None, one) == "like"
        assert resolver.translate("likes", "fr_FR", None, many) == "likes"


class TestShippedCatalogs:
    """Lookups against the catalogs shipped in app/locales."""

    def test_group_name_per_domain(self, app_resolver):
        assert app_resolver.translate("Group.name", "fr_FR", "groups_index") == "Nom"
        assert app_resolver.translate("Group.name", "fr_FR", "groups") == (
            "Nom du groupe"
        )

    def test_horse_plurals(self, app_resolver):
        one = MessageVariant(count=1, singular="horse", context="context2")
        two = MessageVariant(count=2, singular="horse", context="context2")
        assert app_resolver.translate("horses", "fr_FR", "default", one) == "rosse"
        assert app_resolver.translate("horses", "fr_FR", "default", two) == "rosses"
