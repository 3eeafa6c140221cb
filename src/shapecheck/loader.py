"""Loading of candidate documents and schema objects for the CLI.

Schemas are Python objects, so they are looked up by reference
('package.module:ATTRIBUTE' or 'path/to/file.py:ATTRIBUTE') instead of
being read from a schema file format.
"""

import importlib
import importlib.util
import json
import logging
from pathlib import Path
from typing import Any

from .declarations import Schema, is_schema
from .exceptions import SchemaReferenceError

logger = logging.getLogger(__name__)


def load_records(data_path: Path, lines: bool = False) -> list[Any]:
    """Load candidate values from a JSON or JSON Lines file.

    Args:
        data_path: File to read
        lines: Treat the file as JSON Lines (one value per non-blank line)

    Returns:
        List of decoded values (a single element for plain JSON)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the content is not valid JSON
    """
    text = Path(data_path).read_text(encoding="utf-8")

    if not lines:
        try:
            return [json.loads(text)]
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {data_path}: {e}") from e

    records = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON on line {line_number} of {data_path}: {e}") from e

    logger.debug(f"Loaded {len(records)} records from {data_path}")
    return records


def _import_module(module_ref: str, reference: str):
    if module_ref.endswith(".py"):
        module_path = Path(module_ref)
        if not module_path.exists():
            raise SchemaReferenceError(reference, f"file not found: {module_path}")
        spec = importlib.util.spec_from_file_location(module_path.stem, module_path)
        if spec is None or spec.loader is None:
            raise SchemaReferenceError(reference, f"cannot load {module_path}")
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            raise SchemaReferenceError(reference, f"loading {module_path} failed: {type(e).__name__}: {e}") from e
        return module

    try:
        return importlib.import_module(module_ref)
    except ImportError as e:
        raise SchemaReferenceError(reference, str(e)) from e
    except Exception as e:
        # module found but raised while executing
        raise SchemaReferenceError(reference, f"loading {module_ref} failed: {type(e).__name__}: {e}") from e


def resolve_schema(reference: str) -> Schema:
    """Resolve a 'module:attribute' reference to a schema object.

    The attribute part may be dotted to reach nested attributes.

    Raises:
        SchemaReferenceError: If the module or attribute cannot be found, or
                              the object found is not a schema
    """
    module_ref, sep, attribute = reference.rpartition(":")
    if not sep or not module_ref or not attribute:
        raise SchemaReferenceError(reference, "expected the form 'module:ATTRIBUTE'")

    target = _import_module(module_ref, reference)
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise SchemaReferenceError(reference, f"no attribute '{part}'") from e

    if not is_schema(target):
        raise SchemaReferenceError(reference, f"object of type {type(target).__name__} is not a schema")

    logger.debug(f"Resolved schema reference {reference}")
    return target
