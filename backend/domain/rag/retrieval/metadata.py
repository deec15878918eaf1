"""
Metadata field selection for returned results
"""

from typing import Dict, Any, List, Optional


def parse_metadata_fields(raw: Optional[str]) -> Optional[List[str]]:
    """
    Parse a comma-separated field allowlist ("title, url,text").

    Returns None when no allowlist is configured, meaning full metadata.
    """
    if not raw:
        return None
    fields = [field.strip() for field in raw.split(",")]
    fields = [field for field in fields if field]
    return fields or None


def project_metadata(
    metadata: Dict[str, Any],
    fields: Optional[List[str]] = None
) -> Dict[str, Any]:
    """
    Restrict metadata to exactly the allowlisted keys.

    Missing keys map to None. Without an allowlist the mapping passes through
    unchanged.
    """
    if fields is None:
        return metadata
    return {field: metadata.get(field) for field in fields}
