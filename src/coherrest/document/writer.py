"""Serializes an enriched document next to its source file."""

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path

import yaml

from coherrest.document.loader import detect_encoding
from coherrest.errors import WriteError

logger = logging.getLogger(__name__)

ENRICHED_SUFFIX = "_enriched"


class _NoAliasDumper(yaml.SafeDumper):
    """SafeDumper that writes repeated objects in full instead of as aliases."""

    def ignore_aliases(self, data):
        return True


def enriched_path(file_path: Path) -> Path:
    """Derive ``<dir>/<stem>_enriched<suffix>`` from the input path."""
    return file_path.with_name(f"{file_path.stem}{ENRICHED_SUFFIX}{file_path.suffix}")


def dump_document(doc: dict, encoding: str) -> str:
    if encoding == "json":
        return json.dumps(doc, indent=2, ensure_ascii=False) + "\n"
    return yaml.dump(
        doc,
        Dumper=_NoAliasDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def save_document(doc: dict, original_path: Path) -> Path:
    """Write the document beside ``original_path`` in the same encoding.

    The text goes to a temporary file in the output directory which then
    replaces the output path, so a failed write leaves any previous output
    untouched and no partial file behind.
    """
    output = enriched_path(original_path)
    text = dump_document(doc, detect_encoding(original_path))

    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=output.parent,
            prefix=f".{output.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_path = Path(handle.name)
            handle.write(text)
        if output.exists():
            shutil.copymode(output, tmp_path)
        else:
            os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, output)
    except OSError as e:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise WriteError(f"Cannot write {output}: {e}") from e

    logger.debug("Wrote %d bytes to %s", len(text), output)
    return output
