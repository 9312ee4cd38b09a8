"""Built-in development tools.

Each handler is pure: it formats a canned report with the supplied
arguments and never inspects the code it is given.

Tools provided:
- `analyze-code(code, language)`: code quality report.
- `generate-tests(code, framework?)`: test skeleton, jest by default.
- `optimize-performance(code, metrics?)`: performance suggestions.
"""

from typing import Any, Mapping

import weave
from mcp import types

from saas_mcp.dispatcher import ToolEntry

DEFAULT_TEST_FRAMEWORK = "jest"


def _text(text: str) -> list[types.TextContent]:
    return [types.TextContent(type="text", text=text)]


@weave.op()
def analyze_code(arguments: Mapping[str, Any]) -> list[types.TextContent]:
    """Return a code quality report for the declared language."""
    language = arguments.get("language") or "unknown"
    return _text(
        f"Analyzing {language} code...\n\n"
        "Code Quality Report:\n"
        "- Structure: Good\n"
        "- Readability: Excellent\n"
        "- Suggestions: Consider adding type annotations"
    )


@weave.op()
def generate_tests(arguments: Mapping[str, Any]) -> list[types.TextContent]:
    """Return a unit test skeleton for the requested framework."""
    framework = arguments.get("framework") or DEFAULT_TEST_FRAMEWORK
    return _text(
        f"Generated {framework} tests:\n"
        "```javascript\n"
        "describe('YourFunction', () => {\n"
        "  it('should work correctly', () => {\n"
        "    expect(yourFunction()).toBe(expected);\n"
        "  });\n"
        "});\n"
        "```"
    )


@weave.op()
def optimize_performance(arguments: Mapping[str, Any]) -> list[types.TextContent]:
    """Return performance optimization suggestions."""
    return _text(
        "Performance Analysis:\n"
        "- Current complexity: O(n²)\n"
        "- Suggested optimization: Use Map for O(1) lookups\n"
        "- Potential improvement: 70% faster execution"
    )


TOOLS: list[ToolEntry] = [
    ToolEntry(
        descriptor=types.Tool(
            name="analyze-code",
            description="Analyze code quality and provide improvement suggestions",
            inputSchema={
                "type": "object",
                "properties": {
                    "code": {"type": "string", "description": "Code to analyze"},
                    "language": {"type": "string", "description": "Programming language"},
                },
                "required": ["code", "language"],
            },
        ),
        handler=analyze_code,
    ),
    ToolEntry(
        descriptor=types.Tool(
            name="generate-tests",
            description="Generate unit tests for provided code",
            inputSchema={
                "type": "object",
                "properties": {
                    "code": {"type": "string", "description": "Code to generate tests for"},
                    "framework": {
                        "type": "string",
                        "description": "Testing framework (jest, mocha, etc.)",
                    },
                },
                "required": ["code"],
            },
        ),
        handler=generate_tests,
    ),
    ToolEntry(
        descriptor=types.Tool(
            name="optimize-performance",
            description="Analyze and suggest performance optimizations",
            inputSchema={
                "type": "object",
                "properties": {
                    "code": {"type": "string", "description": "Code to optimize"},
                    "metrics": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Specific metrics to focus on",
                    },
                },
                "required": ["code"],
            },
        ),
        handler=optimize_performance,
    ),
]
