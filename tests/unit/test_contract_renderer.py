#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_contract_renderer.py
"""Unit tests for ContractRenderer and the element dispatcher.

Tests cover:
- Text node rendering (marks, color, multi-line text, nested children)
- The per-type rendering rules, including paragraph nesting
- Clause depth tracking
- Editable and static mentions, fan-out of edits, re-seeding
- Malformed and unknown nodes

"""

from types import MappingProxyType

import pytest

from contractview.ast import ElementNode, TextNode
from contractview.exceptions import InvalidOptionsError
from contractview.mentions import MentionStore
from contractview.options import BaseRendererOptions, ContractRendererOptions
from contractview.renderers.context import RenderContext
from contractview.renderers.contract import ContractRenderer
from contractview.styled import StyledElement, find_all, text_content


def render(nodes, options=None):
    return ContractRenderer(options).render_nodes(nodes)


def mention_inputs(output, mention_id=None):
    inputs = find_all(output, tag="input")
    if mention_id is None:
        return inputs
    return [element for element in inputs if element.attrs["data-mention-id"] == mention_id]


@pytest.mark.unit
class TestTextRendering:
    """Tests for text node rendering."""

    def test_simple_text(self):
        (span,) = render([{"text": "Hello World"}])
        assert span == StyledElement("span", children=["Hello World"])

    @pytest.mark.parametrize("mark,tag", [("bold", "strong"), ("italic", "em"), ("underline", "u")])
    def test_marks_wrap_the_text_span(self, mark, tag):
        (wrapper,) = render([{"text": "Styled", mark: True}])
        assert wrapper.tag == tag
        assert wrapper.children == [StyledElement("span", children=["Styled"])]

    def test_color_is_an_inline_style(self):
        (span,) = render([{"text": "Colored Text", "color": "red"}])
        assert span.style == {"color": "red"}

    def test_multiline_text_preserves_whitespace(self):
        (span,) = render([{"text": "line one\nline two"}])
        assert span.style == {"white-space": "pre-wrap"}

    def test_children_render_after_text_inside_marks(self):
        (strong,) = render([{"text": "Parent ", "bold": True, "children": [{"text": "child"}]}])
        assert strong.tag == "strong"
        span = strong.children[0]
        assert span.children[0] == "Parent "
        assert span.children[1] == StyledElement("span", children=["child"])
        assert text_content(strong) == "Parent child"

    def test_children_of_text_have_no_parent_type(self):
        output = render([{"type": "p", "children": [{"text": "a", "children": [{"type": "p", "children": []}]}]}])
        # The inner paragraph is below a text node, not directly below a paragraph
        assert len(find_all(output, tag="p")) == 2

    def test_empty_text_renders_empty_span(self):
        (span,) = render([{"text": ""}])
        assert span.children == []


@pytest.mark.unit
class TestElementRules:
    """Tests for the per-type rendering rules."""

    @pytest.mark.parametrize(
        "node_type,tag,class_name",
        [
            ("block", "div", "contract-block"),
            ("h1", "h1", "contract-title"),
            ("h4", "h4", "contract-subtitle"),
            ("p", "p", "contract-text"),
            ("ul", "ul", "contract-list"),
            ("li", "li", "contract-list-item"),
            ("lic", "div", "contract-list-content"),
            ("clause", "section", "contract-clause"),
        ],
    )
    def test_type_table(self, node_type, tag, class_name):
        (element,) = render([{"type": node_type, "children": [{"text": "Body"}]}])
        assert element.tag == tag
        assert element.classes == [class_name]
        assert text_content(element) == "Body"

    def test_paragraph_inside_paragraph_renders_inline(self):
        (outer,) = render([{"type": "p", "children": [{"type": "p", "children": [{"text": "Inner"}]}]}])
        assert outer.tag == "p"
        inner = outer.children[0]
        assert inner.tag == "span"
        assert inner.classes == ["contract-text-inline"]
        assert len(find_all(outer, tag="p")) == 1

    def test_paragraph_inside_block_stays_a_paragraph(self):
        (block,) = render([{"type": "block", "children": [{"type": "p", "children": [{"text": "x"}]}]}])
        assert block.children[0].tag == "p"

    def test_paragraph_rule_checks_only_the_immediate_parent(self):
        output = render(
            [{"type": "p", "children": [{"type": "block", "children": [{"type": "p", "children": []}]}]}]
        )
        assert len(find_all(output, tag="p")) == 2

    def test_nested_list(self):
        output = render(
            [{"type": "ul", "children": [{"type": "li", "children": [{"type": "lic", "children": [{"text": "Item"}]}]}]}]
        )
        (item,) = find_all(output, tag="li")
        assert text_content(item) == "Item"
        assert find_all(item, class_name="contract-list-content")

    def test_text_fallback_when_children_absent(self):
        (paragraph,) = render([{"type": "p", "text": "Literal"}])
        assert paragraph.children == [StyledElement("span", classes=["element-text"], children=["Literal"])]

    def test_empty_children_take_precedence_over_text(self):
        (paragraph,) = render([{"type": "p", "text": "Ignored", "children": []}])
        assert paragraph.children == []

    def test_element_marks_apply_to_whole_subtree(self):
        (block,) = render(
            [
                {
                    "type": "block",
                    "bold": True,
                    "italic": True,
                    "underline": True,
                    "children": [{"type": "p", "children": [{"text": "Inherited Styles"}]}, {"text": "Second"}],
                }
            ]
        )
        assert block.classes == ["contract-block"]
        (underline,) = block.children
        assert underline.tag == "u"
        emphasis = underline.children[0]
        strong = emphasis.children[0]
        assert (emphasis.tag, strong.tag) == ("em", "strong")
        assert [child.tag for child in strong.children] == ["p", "span"]

    def test_element_marks_merge_with_a_marked_only_child(self):
        (paragraph,) = render([{"type": "p", "bold": True, "children": [{"text": "x", "underline": True}]}])
        underline = paragraph.children[0]
        assert underline.tag == "u"
        assert underline.children[0].tag == "strong"
        assert underline.children[0].children == [StyledElement("span", children=["x"])]

    def test_unknown_type_falls_back_to_generic_container(self):
        (element,) = render([{"type": "table", "children": [{"text": "Cell"}]}])
        assert element.tag == "div"
        assert element.has_class("contract-element-table")
        assert text_content(element) == "Cell"

    def test_malformed_node_renders_empty_container(self):
        (element,) = render([{"align": "center"}])
        assert element.tag == "div"
        assert element.classes == ["contract-element"]
        assert element.children == []

    def test_malformed_node_keeps_marks(self):
        (element,) = render([{"bold": True}])
        assert element.children == [StyledElement("strong")]

    def test_non_mapping_children_are_absorbed(self):
        (paragraph,) = render([{"type": "p", "children": ["plain", 7]}])
        assert paragraph.children[0] == StyledElement("span", children=["plain"])
        assert paragraph.children[1].classes == ["contract-element"]

    def test_typed_nodes_are_accepted(self):
        (heading,) = render([ElementNode(type="h1", children=[TextNode(text="Title")])])
        assert heading.classes == ["contract-title"]


@pytest.mark.unit
class TestClauseDepth:
    """Tests for clause depth tracking."""

    def test_nested_clauses(self):
        output = render(
            [{"type": "clause", "children": [{"type": "clause", "children": [{"type": "clause", "children": []}]}]}]
        )
        depths = [element.attrs["data-depth"] for element in find_all(output, class_name="contract-clause")]
        assert depths == ["0", "1", "2"]

    def test_sibling_clauses_are_independent(self):
        output = render(
            [
                {
                    "type": "clause",
                    "children": [{"type": "clause", "children": []}, {"type": "clause", "children": []}],
                },
                {"type": "clause", "children": [{"type": "clause", "children": []}]},
            ]
        )
        first, second = output
        assert first.attrs["data-depth"] == "0"
        assert second.attrs["data-depth"] == "0"
        assert [child.attrs["data-depth"] for child in first.children] == ["1", "1"]
        assert [child.attrs["data-depth"] for child in second.children] == ["1"]

    def test_non_clause_elements_pass_depth_through(self):
        output = render(
            [{"type": "clause", "children": [{"type": "block", "children": [{"type": "clause", "children": []}]}]}]
        )
        inner = find_all(output, class_name="contract-clause")[1]
        assert inner.attrs["data-depth"] == "1"

    def test_depth_passes_through_text_children(self):
        output = render(
            [{"type": "clause", "children": [{"text": "a", "children": [{"type": "clause", "children": []}]}]}]
        )
        inner = find_all(output, class_name="contract-clause")[1]
        assert inner.attrs["data-depth"] == "1"

    def test_clause_marks(self):
        (clause,) = render([{"type": "clause", "italic": True, "children": [{"text": "x"}]}])
        assert clause.children[0].tag == "em"


@pytest.mark.unit
class TestMentions:
    """Tests for mention rendering and synchronization."""

    def test_editable_mention_renders_input_with_seeded_value(self, mention_document):
        output = render(mention_document)
        values = [element.attrs["value"] for element in mention_inputs(output)]
        assert values == ["ACME", "Initech", "ACME"]

    def test_mention_styling(self, mention_document):
        (mention,) = find_all(render(mention_document), class_name="contract-mention")[:1]
        assert mention.tag == "span"
        assert mention.style["background-color"] == "blue"
        assert mention.style["color"] == "white"
        assert mention.style["display"] == "inline-block"

    def test_mention_without_color_has_no_background(self, mention_document):
        client = find_all(render(mention_document), class_name="contract-mention")[1]
        assert "background-color" not in client.style

    def test_input_width_follows_value_length(self, mention_document):
        (first,) = mention_inputs(render(mention_document), "client")
        assert first.style["width"] == "7ch"
        assert first.style["min-width"] == "20px"

    def test_update_fans_out_to_every_occurrence(self, mention_document):
        renderer = ContractRenderer()
        renderer.render_nodes(mention_document)
        renderer.on_mention_edit("party", "Globex")
        output = renderer.render_nodes(mention_document)
        assert [element.attrs["value"] for element in mention_inputs(output, "party")] == ["Globex", "Globex"]
        assert [element.attrs["value"] for element in mention_inputs(output, "client")] == ["Initech"]

    def test_input_on_change_writes_to_store(self, mention_document):
        renderer = ContractRenderer()
        first = mention_inputs(renderer.render_nodes(mention_document), "party")[0]
        first.on_change("Umbrella")
        assert renderer.store.get("party") == "Umbrella"
        output = renderer.render_nodes()
        assert [element.attrs["value"] for element in mention_inputs(output, "party")] == ["Umbrella", "Umbrella"]

    def test_render_pass_reads_one_snapshot(self, mention_document):
        renderer = ContractRenderer()
        renderer.render_nodes(mention_document)
        rendered = []
        renderer.store.subscribe(lambda mention_id, value: rendered.append(renderer.render_nodes()))
        renderer.on_mention_edit("party", "Hooli")
        (output,) = rendered
        assert {element.attrs["value"] for element in mention_inputs(output, "party")} == {"Hooli"}

    def test_first_wins_at_seeding(self):
        nodes = [
            {"type": "mention", "id": "a", "value": "first", "children": []},
            {"type": "mention", "id": "a", "value": "second", "children": []},
        ]
        renderer = ContractRenderer()
        output = renderer.render_nodes(nodes)
        assert dict(renderer.store.read()) == {"a": "first"}
        assert [element.attrs["value"] for element in mention_inputs(output)] == ["first", "first"]

    def test_mention_without_value_is_excluded_but_shows_its_text(self):
        renderer = ContractRenderer()
        output = renderer.render_nodes(
            [{"type": "mention", "id": "blank", "children": [{"text": "literal"}]}]
        )
        assert "blank" not in renderer.store
        (element,) = mention_inputs(output)
        assert element.attrs["value"] == "literal"

    def test_static_mention_without_id_renders_children_with_marks(self):
        (mention,) = render(
            [{"type": "mention", "color": "blue", "bold": True, "children": [{"text": "Mentioned Entity"}]}]
        )
        assert mention.classes == ["contract-mention"]
        assert mention.style["background-color"] == "blue"
        assert mention.children[0].tag == "strong"
        assert text_content(mention) == "Mentioned Entity"
        assert not mention_inputs(mention)

    def test_editable_mention_ignores_marks(self):
        (mention,) = render([{"type": "mention", "id": "a", "value": "v", "bold": True, "children": []}])
        assert [child.tag for child in mention.children] == ["input"]

    def test_static_mentions_option(self, mention_document):
        options = ContractRendererOptions(editable_mentions=False)
        output = render(mention_document, options)
        assert not mention_inputs(output)
        assert text_content(output) == "Between ACME and Initech. ACME"

    def test_custom_foreground(self, mention_document):
        options = ContractRendererOptions(mention_foreground="black")
        (mention,) = find_all(render(mention_document, options), class_name="contract-mention")[:1]
        assert mention.style["color"] == "black"
        assert mention.children[0].style["color"] == "black"


@pytest.mark.unit
class TestSession:
    """Tests for seeding, re-seeding and the render entry point."""

    def test_empty_input(self):
        renderer = ContractRenderer()
        assert renderer.render_nodes([]) == []
        assert len(renderer.store) == 0

    def test_render_without_document(self):
        assert ContractRenderer().render_nodes() == []

    def test_same_reference_keeps_edits(self, mention_document):
        renderer = ContractRenderer()
        renderer.render_nodes(mention_document)
        renderer.on_mention_edit("party", "Edited")
        output = renderer.render_nodes(mention_document)
        assert mention_inputs(output, "party")[0].attrs["value"] == "Edited"

    def test_new_reference_reseeds(self, mention_document):
        renderer = ContractRenderer()
        renderer.render_nodes(mention_document)
        renderer.on_mention_edit("party", "Edited")
        replacement = list(mention_document)
        output = renderer.render_nodes(replacement)
        assert mention_inputs(output, "party")[0].attrs["value"] == "ACME"
        assert renderer.store.get("party") == "ACME"

    def test_load_reports_reseed(self, mention_document):
        renderer = ContractRenderer()
        assert renderer.load(mention_document) is True
        assert renderer.load(mention_document) is False

    def test_reset(self, mention_document):
        renderer = ContractRenderer()
        renderer.render_nodes(mention_document)
        renderer.reset()
        assert renderer.nodes == []
        assert len(renderer.store) == 0

    def test_shared_store(self, mention_document):
        store = MentionStore()
        renderer = ContractRenderer(store=store)
        renderer.render_nodes(mention_document)
        assert store.get("client") == "Initech"

    def test_one_output_per_top_level_node(self, sample_contract_path):
        from contractview.ast import load_nodes

        nodes = load_nodes(sample_contract_path)
        assert len(ContractRenderer().render_nodes(nodes)) == len(nodes)

    def test_invalid_options_type(self):
        with pytest.raises(InvalidOptionsError):
            ContractRenderer(BaseRendererOptions())  # type: ignore[arg-type]


@pytest.mark.unit
class TestRenderContext:
    """Tests for RenderContext defaults and derivation."""

    def test_default_context(self):
        context = RenderContext()
        assert context.clause_depth == 0
        assert context.parent_type is None
        assert dict(context.mention_values) == {}
        assert context.mention_value("missing", None) == ""

    def test_default_mention_values_are_read_only(self):
        with pytest.raises(TypeError):
            RenderContext().mention_values["a"] = "b"  # type: ignore[index]

    def test_derived_contexts_keep_the_snapshot(self):
        context = RenderContext(mention_values=MappingProxyType({"a": "1"}))
        child = context.enter_clause().for_children("p")
        assert (child.clause_depth, child.parent_type) == (1, "p")
        assert child.mention_value("a", "fallback") == "1"
