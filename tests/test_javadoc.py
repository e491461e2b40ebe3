"""Tests for the Javadoc entity."""

import pytest
from pydantic import ValidationError

from javagen import DocParam, EntityValidationError, Javadoc


@pytest.fixture
def everything():
    """A builder with every section populated."""
    return (
        Javadoc.builder()
        .content("test")
        .content("derp")
        .author("Logan Ferree (Tadukoo)")
        .version("Alpha v.0.1")
        .since("Alpha v.0.0.1")
        .param("test", "yes")
        .param("derp", "no")
        .return_val("this, to continue building")
    )


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


class TestJavadocDefaults:
    def test_defaults(self):
        doc = Javadoc.builder().build()
        assert doc.condensed is False
        assert doc.content == ()
        assert doc.author is None
        assert doc.version is None
        assert doc.since is None
        assert doc.params == ()
        assert doc.return_val is None


class TestJavadocBuilder:
    def test_condensed_value(self):
        assert Javadoc.builder().condensed(True).build().condensed is True

    def test_condensed_flag(self):
        assert Javadoc.builder().condensed().build().condensed is True

    def test_content_list_replaces(self):
        doc = Javadoc.builder().content("old").content(["test", "derp"]).build()
        assert doc.content == ("test", "derp")

    def test_content_line_appends(self):
        doc = Javadoc.builder().content("test").build()
        assert doc.content == ("test",)

    def test_params_list(self):
        doc = Javadoc.builder().params([("test", "yes"), ("derp", "no")]).build()
        assert doc.params == (("test", "yes"), ("derp", "no"))

    def test_param_pair(self):
        doc = Javadoc.builder().param(("test", "yes")).build()
        assert doc.params == (DocParam("test", "yes"),)

    def test_param_pieces(self):
        doc = Javadoc.builder().param("test", "yes").build()
        param = doc.params[0]
        assert param.name == "test"
        assert param.description == "yes"

    def test_builder_list_not_shared(self):
        content = ["test"]
        doc = Javadoc.builder().content(content).build()
        content.append("derp")
        assert doc.content == ("test",)

    def test_none_content_line_rejected(self):
        with pytest.raises(EntityValidationError) as exc_info:
            Javadoc.builder().content(["a", None]).build()
        assert exc_info.value.entity == "Javadoc"
        assert exc_info.value.errors[0].startswith("Invalid content.1:")
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_set_all(self, everything):
        doc = everything.condensed().build()
        assert doc.condensed is True
        assert doc.content == ("test", "derp")
        assert doc.author == "Logan Ferree (Tadukoo)"
        assert doc.version == "Alpha v.0.1"
        assert doc.since == "Alpha v.0.0.1"
        assert doc.params == (("test", "yes"), ("derp", "no"))
        assert doc.return_val == "this, to continue building"


# ---------------------------------------------------------------------------
# Expanded rendering
# ---------------------------------------------------------------------------


class TestJavadocExpanded:
    def test_empty(self):
        assert str(Javadoc.builder().build()) == "/**\n */"

    def test_content(self):
        doc = Javadoc.builder().content("test").content("derp").build()
        assert str(doc) == "/**\n * test\n * derp\n */"

    @pytest.mark.parametrize(
        "setter, value, expected",
        [
            ("author", "Logan Ferree (Tadukoo)", "@author Logan Ferree (Tadukoo)"),
            ("version", "Alpha v.0.1", "@version Alpha v.0.1"),
            ("since", "Alpha v.0.0.1", "@since Alpha v.0.0.1"),
            ("return_val", "this, to continue building", "@return this, to continue building"),
        ],
    )
    def test_single_tag(self, setter, value, expected):
        builder = Javadoc.builder()
        getattr(builder, setter)(value)
        assert str(builder.build()) == f"/**\n * {expected}\n */"

    def test_single_param(self):
        doc = Javadoc.builder().param("test", "yes").build()
        assert str(doc) == "/**\n * @param test yes\n */"

    def test_multiple_params(self):
        doc = Javadoc.builder().param("test", "yes").param("derp", "no").build()
        assert str(doc) == "/**\n * @param test yes\n * @param derp no\n */"

    def test_blank_tags_are_skipped(self):
        doc = Javadoc.builder().author("").version("  ").return_val("").build()
        assert str(doc) == "/**\n */"

    def test_info_and_code_separated(self):
        doc = Javadoc.builder().author("me").return_val("it").build()
        assert str(doc) == "/**\n * @author me\n * \n * @return it\n */"

    def test_content_then_code(self):
        doc = Javadoc.builder().content("Does a thing").param("x", "the x").build()
        assert str(doc) == "/**\n * Does a thing\n * \n * @param x the x\n */"

    def test_param_without_description(self):
        doc = Javadoc.builder().param("x").build()
        assert str(doc) == "/**\n * @param x\n */"

    def test_everything(self, everything):
        expected = (
            "/**\n"
            " * test\n"
            " * derp\n"
            " * \n"
            " * @author Logan Ferree (Tadukoo)\n"
            " * @version Alpha v.0.1\n"
            " * @since Alpha v.0.0.1\n"
            " * \n"
            " * @param test yes\n"
            " * @param derp no\n"
            " * @return this, to continue building\n"
            " */"
        )
        assert str(everything.build()) == expected


# ---------------------------------------------------------------------------
# Condensed rendering
# ---------------------------------------------------------------------------


class TestJavadocCondensed:
    def test_empty(self):
        assert str(Javadoc.builder().condensed().build()) == "/** */"

    def test_content(self):
        doc = Javadoc.builder().condensed().content(["test", "derp"]).build()
        assert str(doc) == "/** test\n * derp */"

    def test_author(self):
        doc = Javadoc.builder().condensed().author("Logan Ferree (Tadukoo)").build()
        assert str(doc) == "/** @author Logan Ferree (Tadukoo) */"

    def test_multiple_params(self):
        doc = Javadoc.builder().condensed().param("test", "yes").param("derp", "no").build()
        assert str(doc) == "/** @param test yes\n * @param derp no */"

    def test_return_val(self):
        doc = Javadoc.builder().condensed().return_val("this, to continue building").build()
        assert str(doc) == "/** @return this, to continue building */"

    def test_everything(self, everything):
        expected = (
            "/** test\n"
            " * derp\n"
            " * \n"
            " * @author Logan Ferree (Tadukoo)\n"
            " * @version Alpha v.0.1\n"
            " * @since Alpha v.0.0.1\n"
            " * \n"
            " * @param test yes\n"
            " * @param derp no\n"
            " * @return this, to continue building */"
        )
        assert str(everything.condensed().build()) == expected


class TestJavadocEquality:
    def test_equal_via_different_paths(self):
        doc = Javadoc.builder().content(["a", "b"]).build()
        other = Javadoc.builder().content("a").content("b").build()
        assert doc == other

    def test_condensed_differs(self):
        assert Javadoc.builder().build() != Javadoc.builder().condensed().build()

    def test_render_is_deterministic(self, everything):
        doc = everything.build()
        assert str(doc) == str(doc)
