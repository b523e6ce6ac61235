"""Tests for relation annotations, doc extraction and visibility mapping."""

import pytest
from erdgen.core.ast_parser.models import RelationAnnotation, Visibility
from erdgen.core.ast_parser.relations import (
    canonical_relation,
    find_relation_annotation,
    parse_relation_annotation,
    relation_key,
)
from erdgen.core.ast_parser.utils import unquote_string_literal
from erdgen.core.ast_parser.visibility import resolve_visibility_text


# =========================================================================
# Tests: Annotation parsing
# =========================================================================

class TestParseRelationAnnotation:
    def test_spaced(self):
        annotation = parse_relation_annotation("`#[relation = 1..n : owns]`")
        assert annotation == RelationAnnotation(cardinality="1..n", label="owns")

    def test_compact(self):
        annotation = parse_relation_annotation("`#[relation=n..n:exist_in]`")
        assert annotation == RelationAnnotation(cardinality="n..n", label="exist_in")

    def test_surrounding_whitespace_ignored(self):
        annotation = parse_relation_annotation(" `#[relation = 0..1 : refs]` ")
        assert annotation == RelationAnnotation(cardinality="0..1", label="refs")

    def test_splits_at_last_colon(self):
        annotation = parse_relation_annotation("`#[relation = a : b : c]`")
        assert annotation.cardinality == "a : b"
        assert annotation.label == "c"

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "The owning organism.",
            "#[relation = 1..n : owns]",
            "`#[relation = 1..n]`",
            "`#[Relation = 1..n : owns]`",
            "`#[relation = 1..n : owns]` and more",
        ],
    )
    def test_not_an_annotation(self, text):
        assert parse_relation_annotation(text) is None

    def test_first_matching_line_wins(self):
        lines = ["Owner of the gene.", "`#[relation = 1 : a]`", "`#[relation = 2 : b]`"]
        assert find_relation_annotation(lines) == RelationAnnotation("1", "a")

    def test_no_lines(self):
        assert find_relation_annotation([]) is None


# =========================================================================
# Tests: Canonicalization
# =========================================================================

class TestCanonicalRelation:
    def test_key_is_sorted(self):
        assert relation_key("BModel", "AModel") == "AModel-BModel"
        assert relation_key("AModel", "BModel") == "AModel-BModel"

    def test_declared_on_first_class(self):
        entry = canonical_relation("AModel", "BModel", RelationAnnotation("1..n", "owns"))
        assert (entry.class_a, entry.cardinality_a) == ("AModel", "1..n")
        assert (entry.class_b, entry.cardinality_b) == ("BModel", "")
        assert entry.label == "owns"

    def test_declared_on_second_class(self):
        entry = canonical_relation("BModel", "AModel", RelationAnnotation("1..n", "owns"))
        assert (entry.class_a, entry.cardinality_a) == ("AModel", "")
        assert (entry.class_b, entry.cardinality_b) == ("BModel", "1..n")

    def test_self_relation(self):
        entry = canonical_relation("NodeModel", "NodeModel", RelationAnnotation("0..1", "parent"))
        assert entry.key == "NodeModel-NodeModel"
        assert entry.class_a == entry.class_b == "NodeModel"
        assert (entry.cardinality_a, entry.cardinality_b) == ("", "0..1")

    def test_key_matches_for_either_declaring_side(self):
        annotation = RelationAnnotation("n..n", "exist_in")
        forward = canonical_relation("GeneModel", "OrganismModel", annotation)
        backward = canonical_relation("OrganismModel", "GeneModel", annotation)
        assert forward.key == backward.key == "GeneModel-OrganismModel"
        assert (forward.cardinality_a, forward.cardinality_b) == ("n..n", "")
        assert (backward.cardinality_a, backward.cardinality_b) == ("", "n..n")


# =========================================================================
# Tests: String literals
# =========================================================================

class TestUnquoteStringLiteral:
    def test_plain(self):
        assert unquote_string_literal('"`#[relation = 1 : a]`"') == "`#[relation = 1 : a]`"

    def test_escapes(self):
        assert unquote_string_literal(r'"say \"hi\"\n\u{41}\x42"') == 'say "hi"\nAB'

    def test_raw(self):
        assert unquote_string_literal('r#"a "quoted" b"#') == 'a "quoted" b'
        assert unquote_string_literal('r"\\n"') == "\\n"


# =========================================================================
# Tests: Visibility resolution
# =========================================================================

class TestResolveVisibility:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("pub", Visibility.PUBLIC),
            ("pub(self)", Visibility.PRIVATE),
            ("pub(in self)", Visibility.PRIVATE),
            ("pub(crate)", Visibility.INTERNAL),
            ("pub(super)", Visibility.INTERNAL),
            ("pub(in crate::a::b)", Visibility.INTERNAL),
            ("pub( crate )", Visibility.INTERNAL),
            ("crate", Visibility.INTERNAL),
        ],
    )
    def test_explicit_modifiers(self, text, expected):
        assert resolve_visibility_text(text, Visibility.PRIVATE) == expected

    @pytest.mark.parametrize("default", list(Visibility))
    def test_inherited_uses_default(self, default):
        assert resolve_visibility_text(None, default) == default
        assert resolve_visibility_text("", default) == default

    def test_never_protected(self):
        produced = {
            resolve_visibility_text(t, Visibility.PRIVATE)
            for t in ("pub", "pub(self)", "pub(crate)", None)
        }
        assert Visibility.PROTECTED not in produced

    def test_default_is_private(self):
        assert Visibility.default() == Visibility.PRIVATE
