"""Static documents served under the `saas://` scheme."""

import json

from mcp import types

from saas_mcp.dispatcher import ResourceEntry

BEST_PRACTICES = (
    "# SaaS Best Practices\n\n"
    "1. **Security First**: Always validate input\n"
    "2. **Scalability**: Design for growth\n"
    "3. **Testing**: Maintain >80% coverage"
)

API_TEMPLATES = {
    "endpoints": [
        {"method": "GET", "path": "/api/users", "description": "List users"},
        {"method": "POST", "path": "/api/users", "description": "Create user"},
    ],
}


def best_practices() -> str:
    return BEST_PRACTICES


def api_templates() -> str:
    return json.dumps(API_TEMPLATES, indent=2)


RESOURCES: list[ResourceEntry] = [
    ResourceEntry(
        descriptor=types.Resource(
            uri="saas://docs/best-practices",
            name="Best Practices Guide",
            description="Comprehensive guide for SaaS development best practices",
            mimeType="text/markdown",
        ),
        provider=best_practices,
    ),
    ResourceEntry(
        descriptor=types.Resource(
            uri="saas://templates/api",
            name="API Templates",
            description="Ready-to-use API endpoint templates",
            mimeType="application/json",
        ),
        provider=api_templates,
    ),
]
