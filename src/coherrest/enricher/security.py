"""Syntactic enrichment: declares an API key scheme and applies it globally."""

import logging

from coherrest.document.base import SecurityScheme
from coherrest.errors import FormatError

logger = logging.getLogger(__name__)

API_KEY_SCHEME_NAME = "ApiKeyAuth"

API_KEY_SCHEME = SecurityScheme(
    type="apiKey",
    location="header",
    name="X-API-KEY",
    description="API key required for access. Used to identify Admin users.",
)


def add_security_scheme(doc: dict) -> dict:
    """Add the ApiKeyAuth scheme and make it the only global requirement.

    An existing ``ApiKeyAuth`` entry and any top-level ``security`` value are
    replaced; other schemes under ``components.securitySchemes`` are kept.
    """
    components = _ensure_mapping(doc, "components", "components")
    schemes = _ensure_mapping(components, "securitySchemes", "components.securitySchemes")

    schemes[API_KEY_SCHEME_NAME] = API_KEY_SCHEME.model_dump(by_alias=True)
    doc["security"] = [{API_KEY_SCHEME_NAME: []}]

    logger.debug("Security scheme %s applied globally", API_KEY_SCHEME_NAME)
    return doc


def _ensure_mapping(parent: dict, key: str, location: str) -> dict:
    value = parent.get(key)
    if value is None:
        value = parent[key] = {}
    elif not isinstance(value, dict):
        raise FormatError(f"'{location}' must be a mapping, got {type(value).__name__}")
    return value
