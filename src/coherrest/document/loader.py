"""OpenAPI document loader.

Reads a JSON or YAML OpenAPI file into a plain nested dict.
"""

import json
import logging
from pathlib import Path

import yaml

from coherrest.errors import FormatError, MissingFileError, ParseError

logger = logging.getLogger(__name__)


def detect_encoding(file_path: Path) -> str:
    """Detect the textual encoding of a document from its file name.

    Returns: 'json' for names ending in '.json', 'yaml' for anything else.
    """
    if str(file_path).endswith(".json"):
        return "json"
    return "yaml"


def resolve_input(raw_path: str) -> Path:
    """Turn user input into the path of an existing file."""
    raw_path = raw_path.strip()
    path = Path(raw_path)
    if not raw_path or not path.is_file():
        raise MissingFileError(f"File not found at {raw_path}")
    return path


def load_document(file_path: Path) -> dict:
    """Parse an OpenAPI file into a dict."""
    encoding = detect_encoding(file_path)
    logger.debug("Loading %s as %s", file_path, encoding)

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Cannot read {file_path}: {e}") from e

    try:
        if encoding == "json":
            try:
                doc = json.loads(text)
            except json.JSONDecodeError as e:
                raise ParseError(f"Invalid JSON in {file_path}: {e}") from e
        else:
            try:
                doc = yaml.safe_load(text)
            except yaml.YAMLError as e:
                raise ParseError(f"Invalid YAML in {file_path}: {e}") from e
            doc = _expand_aliases(doc, set())
    except RecursionError as e:
        raise ParseError(f"Document in {file_path} is nested too deeply") from e

    if not isinstance(doc, dict):
        raise FormatError(f"OpenAPI document must be a mapping at top level: {file_path}")
    return doc


def _expand_aliases(node, parents: set[int]):
    """Rebuild containers so every YAML alias becomes an independent copy."""
    if not isinstance(node, (dict, list)):
        return node
    if id(node) in parents:
        raise FormatError("Recursive YAML alias cannot be expanded")

    parents.add(id(node))
    if isinstance(node, dict):
        result = {key: _expand_aliases(value, parents) for key, value in node.items()}
    else:
        result = [_expand_aliases(item, parents) for item in node]
    parents.discard(id(node))
    return result
