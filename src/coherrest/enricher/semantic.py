"""Semantic enrichment: RBAC, validation and PII metadata on every operation."""

import logging
from collections.abc import Iterator

from coherrest.document.base import OperationAnnotations, SecurityContext
from coherrest.errors import FormatError

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "post", "put", "delete", "patch")

PII_MARKERS = ("user", "profile")

REQUIRED_ROLE = "Admin"

VALIDATION_RULES = ["If 'limit' parameter is present, it must be <= 100"]


def is_pii(route: str) -> bool:
    """Heuristic: routes mentioning users or profiles handle personal data."""
    lowered = route.lower()
    return any(marker in lowered for marker in PII_MARKERS)


def iter_operations(doc: dict) -> Iterator[tuple[str, str, dict]]:
    """Yield ``(route, method, operation)`` for each HTTP operation.

    Keys of a path item other than the HTTP methods (``parameters``,
    ``summary``, ``$ref``...) are skipped. A missing or null ``paths``
    yields nothing.
    """
    paths = doc.get("paths")
    if paths is None:
        return
    if not isinstance(paths, dict):
        raise FormatError(f"'paths' must be a mapping, got {type(paths).__name__}")

    for route, methods in paths.items():
        if not isinstance(methods, dict):
            raise FormatError(
                f"Path item '{route}' must be a mapping, got {type(methods).__name__}"
            )
        for method, operation in methods.items():
            if not isinstance(method, str) or method.lower() not in HTTP_METHODS:
                continue
            if not isinstance(operation, dict):
                raise FormatError(
                    f"Operation '{method} {route}' must be a mapping, "
                    f"got {type(operation).__name__}"
                )
            yield str(route), method, operation


def annotations_for(route: str) -> OperationAnnotations:
    return OperationAnnotations(
        security_context=SecurityContext(
            required_role=REQUIRED_ROLE,
            description="Only Admins can access this endpoint",
        ),
        validation_rules=list(VALIDATION_RULES),
        is_pii=is_pii(route),
    )


def enrich_semantics(doc: dict) -> dict:
    """Attach x-security-context, x-validation-rules and x-is-pii to operations.

    Existing values of the three fields are overwritten, not merged.
    """
    count = 0
    for route, method, operation in iter_operations(doc):
        operation.update(annotations_for(route).to_extensions())
        count += 1

    logger.debug("Annotated %d operations", count)
    return doc
