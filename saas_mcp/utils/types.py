"""Shared TypedDict contracts for the status reports."""

from __future__ import annotations

from typing import TypedDict


class McpFeature(TypedDict):
    status: str
    tools: list[str]
    resources: list[str]


class DeploymentFeature(TypedDict):
    platform: str
    environment: str


class Features(TypedDict):
    mcp: McpFeature
    deployment: DeploymentFeature


class ServiceInfo(TypedDict):
    name: str
    version: str
    description: str
    status: str
    timestamp: str
    features: Features
    endpoints: dict[str, str]


class MemoryInfo(TypedDict):
    max_rss: str | None


class RuntimeInfo(TypedDict):
    python: str
    platform: str
    memory: MemoryInfo


class HealthReport(TypedDict):
    status: str
    timestamp: str
    uptime: float
    environment: RuntimeInfo
