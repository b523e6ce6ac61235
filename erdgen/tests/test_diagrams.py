"""Tests for the Mermaid formatter and document assembly."""

from erdgen.core.ast_parser.models import ClassEntry, DiagramTables, Parameter, Visibility
from erdgen.core.diagrams import (
    ClassDiagramFormatter,
    MermaidFormatter,
    assemble_document,
    write_document,
)


def _tables() -> DiagramTables:
    tables = DiagramTables()
    tables.classes["ZebraModel"] = ClassEntry(
        Visibility.PUBLIC, [" class ZebraModel {", "  -u32 id", " }"]
    )
    tables.classes["AntModel"] = ClassEntry(
        Visibility.PRIVATE, [" class AntModel {", " }"]
    )
    tables.relations["ZebraModel-ZooModel"] = ' ZebraModel "" -- "1" ZooModel : lives_in'
    tables.relations["AntModel-ZebraModel"] = ' AntModel "" -- "n" ZebraModel : rides'
    tables.methods["ZebraModel"] = [" ZebraModel: +run()", " ZebraModel: -rest()"]
    tables.methods["Ghost"] = [" Ghost: +boo()"]
    return tables


# =========================================================================
# Tests: Mermaid formatter
# =========================================================================

class TestMermaidFormatter:
    def setup_method(self):
        self.fmt = MermaidFormatter()

    def test_is_a_formatter(self):
        assert isinstance(self.fmt, ClassDiagramFormatter)

    def test_class_block(self):
        assert self.fmt.render_class_header("GeneModel") == " class GeneModel {"
        assert self.fmt.render_field("+", "name", "String") == "  +String name"
        assert self.fmt.render_class_terminator() == " }"

    def test_relation(self):
        line = self.fmt.render_relation("AModel", "", "BModel", "1..n", "owns")
        assert line == ' AModel "" -- "1..n" BModel : owns'

    def test_method_shows_parameter_names(self):
        params = [Parameter("id", "u32"), Parameter("name", "String")]
        line = self.fmt.render_method("GeneModel", "+", "new", params, "GeneModel")
        assert line == " GeneModel: +new(id, name) GeneModel"

    def test_method_without_return_type(self):
        line = self.fmt.render_method("GeneModel", "-", "reset", [], "")
        assert line == " GeneModel: -reset()"

    def test_visibility_markers(self):
        assert self.fmt.render_visibility(Visibility.PUBLIC) == "+"
        assert self.fmt.render_visibility(Visibility.INTERNAL) == "~"
        assert self.fmt.render_visibility(Visibility.PROTECTED) == "#"
        assert self.fmt.render_visibility(Visibility.PRIVATE) == "-"


# =========================================================================
# Tests: Document assembly
# =========================================================================

class TestAssembleDocument:
    def test_layout_and_order(self):
        text = assemble_document(_tables(), "Zoo")

        assert text.split("\n") == [
            "---",
            "title: Zoo",
            "---",
            "classDiagram",
            ' AntModel "" -- "n" ZebraModel : rides',
            ' ZebraModel "" -- "1" ZooModel : lives_in',
            " class AntModel {",
            " }",
            " class ZebraModel {",
            "  -u32 id",
            " }",
            " ZebraModel: +run()",
            " ZebraModel: -rest()",
        ]

    def test_orphan_methods_not_rendered(self):
        text = assemble_document(_tables(), "Zoo")
        assert "Ghost" not in text

    def test_embed_wraps_in_fence(self):
        text = assemble_document(_tables(), "Zoo", embed=True)
        lines = text.split("\n")
        assert lines[0] == "```mermaid"
        assert lines[1] == "---"
        assert lines[-1] == "```"

    def test_empty_tables(self):
        text = assemble_document(DiagramTables(), "ER Diagram")
        assert text == "---\ntitle: ER Diagram\n---\nclassDiagram"

    def test_write_document(self, tmp_path):
        path = tmp_path / "ER.mmd"
        write_document(path, "classDiagram")
        assert path.read_text(encoding="utf-8") == "classDiagram"
