"""CoherREST — security and semantic enrichment of OpenAPI documents."""

__version__ = "0.1.0"
