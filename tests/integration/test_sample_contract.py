#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_sample_contract.py
"""Integration tests rendering the service agreement sample end to end."""

import pytest

from contractview import ContractRenderer, find_all, load_nodes, text_content


@pytest.fixture
def sample_nodes(sample_contract_path):
    return load_nodes(sample_contract_path)


@pytest.mark.integration
class TestServiceAgreement:
    """Render the sample document and check its overall structure."""

    def test_structure(self, sample_nodes):
        output = ContractRenderer().render_nodes(sample_nodes)
        (block,) = output
        assert block.classes == ["contract-block"]
        assert [h.tag for h in find_all(block, class_name="contract-subtitle")] == ["h4", "h4", "h4"]
        assert len(find_all(block, class_name="contract-list-item")) == 2

    def test_clause_depths(self, sample_nodes):
        output = ContractRenderer().render_nodes(sample_nodes)
        depths = [clause.attrs["data-depth"] for clause in find_all(output, class_name="contract-clause")]
        assert depths == ["0", "1", "0"]

    def test_seeded_store(self, sample_nodes):
        renderer = ContractRenderer()
        renderer.render_nodes(sample_nodes)
        assert dict(renderer.store.read()) == {"date": "2023-10-27", "provider": "ACME Ltd"}

    def test_edit_session(self, sample_nodes):
        renderer = ContractRenderer()
        output = renderer.render_nodes(sample_nodes)
        provider_inputs = [
            element for element in find_all(output, tag="input") if element.attrs["data-mention-id"] == "provider"
        ]
        assert len(provider_inputs) == 2

        provider_inputs[1].on_change("Globex")
        output = renderer.render_nodes(sample_nodes)
        values = [
            element.attrs["value"]
            for element in find_all(output, tag="input")
            if element.attrs["data-mention-id"] == "provider"
        ]
        assert values == ["Globex", "Globex"]

    def test_literal_text_fallback(self, sample_nodes):
        output = ContractRenderer().render_nodes(sample_nodes)
        (leaf,) = find_all(output, class_name="element-text")
        assert text_content(leaf) == "This agreement runs for twelve months."

    def test_multiline_text(self, sample_nodes):
        output = ContractRenderer().render_nodes(sample_nodes)
        multiline = [span for span in find_all(output, tag="span") if span.style.get("white-space") == "pre-wrap"]
        assert len(multiline) == 1
        assert multiline[0].first_child == "1.1 Support hours are\nMonday to Friday."
