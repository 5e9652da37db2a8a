from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import quote


@dataclass(frozen=True)
class PathBuilder:
    """Builds request paths for one resource family."""

    tenant_id: str
    base_path: str = ""

    def tenant(self, path: str = "") -> str:
        """
        Tenant-scoped path.
        Example: PathBuilder("t-1", "/workflows").tenant("/abc") -> "/api/tenant/t-1/workflows/abc"
        """
        clean = path if path.startswith("/") else f"/{path}"
        return f"/api/tenant/{self.tenant_id}{self.base_path}{clean}"

    def absolute(self, path: str) -> str:
        """Path off the API root, not scoped to a tenant."""
        return path


def quote_segment(value: str) -> str:
    # Same escaping as encodeURIComponent: only unreserved chars and !*'() survive.
    return quote(str(value), safe="!~*'()")


def enum_value(value: Any) -> str:
    return str(value.value) if isinstance(value, Enum) else str(value)


__all__ = ["PathBuilder", "quote_segment", "enum_value"]
