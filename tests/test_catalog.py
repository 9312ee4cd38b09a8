from __future__ import annotations

from saas_mcp.resources import RESOURCES
from saas_mcp.resources.catalog import best_practices
from saas_mcp.tools import TOOLS
from saas_mcp.tools.catalog import optimize_performance


def _schemas() -> dict:
    return {entry.descriptor.name: entry.descriptor.inputSchema for entry in TOOLS}


def test_tool_required_arguments() -> None:
    schemas = _schemas()

    assert schemas["analyze-code"]["required"] == ["code", "language"]
    assert schemas["generate-tests"]["required"] == ["code"]
    assert schemas["optimize-performance"]["required"] == ["code"]


def test_tool_optional_argument_types() -> None:
    schemas = _schemas()

    assert schemas["generate-tests"]["properties"]["framework"]["type"] == "string"
    metrics = schemas["optimize-performance"]["properties"]["metrics"]
    assert metrics["type"] == "array"
    assert metrics["items"] == {"type": "string"}


def test_every_tool_has_a_description() -> None:
    assert all(entry.descriptor.description for entry in TOOLS)


def test_optimize_performance_ignores_code_content() -> None:
    first = optimize_performance({"code": "for x in y: pass"})
    second = optimize_performance({"code": "", "metrics": ["latency"]})

    assert first[0].text == second[0].text
    assert "O(1) lookups" in first[0].text


def test_resource_uris_use_saas_scheme() -> None:
    assert all(str(entry.descriptor.uri).startswith("saas://") for entry in RESOURCES)


def test_best_practices_lists_three_items() -> None:
    lines = best_practices().splitlines()

    assert lines[0] == "# SaaS Best Practices"
    assert [line[:2] for line in lines if line[:1].isdigit()] == ["1.", "2.", "3."]
