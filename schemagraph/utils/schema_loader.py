"""
Loading schema documents from JSON into structures and indexes.
"""

import json
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from ..models.core import Field, MetaData, Model, Relation, RelationType, SourceLocation, Structure
from ..services.identity_index import IdentityIndexError, UuidIndexes
from .logging_config import get_logger

logger = get_logger(__name__)


class SchemaLoadError(Exception):
    """Custom exception for schema documents that cannot be loaded."""
    pass


class SchemaValidationError(SchemaLoadError):
    """Raised when a parsed schema references unknown fields or models."""
    pass


def load_json(path: Union[str, Path]) -> Tuple[Structure, UuidIndexes]:
    """Load a schema document from a JSON file.

    Args:
        path: Path of the JSON document

    Returns:
        Tuple of (structure, index built over it)

    Raises:
        SchemaLoadError: If the file cannot be read, is not valid JSON or does
            not describe a consistent schema
    """
    path = Path(path)
    try:
        with path.open('r', encoding='utf-8') as f:
            document = json.load(f)
    except OSError as e:
        raise SchemaLoadError(f'Cannot read schema file {path}: {e}')
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f'Invalid JSON in {path}: {e}')
    except UnicodeDecodeError as e:
        raise SchemaLoadError(f'Invalid encoding in {path}: {e}')

    structure, indexes = load_document(document)
    logger.info(f'Loaded {len(structure.models)} models and {len(structure.relations)} relations from {path}')
    return structure, indexes


def load_document(document: Any) -> Tuple[Structure, UuidIndexes]:
    """Build and validate a structure from an already decoded JSON document.

    Raises:
        SchemaLoadError: If the document is malformed
        SchemaValidationError: If a relation references an unknown field or model
    """
    structure = parse_structure(document)

    try:
        indexes = UuidIndexes(structure)
    except IdentityIndexError as e:
        raise SchemaLoadError(str(e)) from e

    validate_relations(structure, indexes)
    return structure, indexes


def parse_structure(document: Any) -> Structure:
    """Convert a decoded JSON document into a structure without validating references."""
    if not isinstance(document, dict):
        raise SchemaLoadError('Schema document must be a JSON object')

    try:
        models = tuple(_parse_model(raw) for raw in _as_list(document['models'], 'models'))
        relations = tuple(_parse_relation(raw) for raw in _as_list(document.get('relations', []), 'relations'))
    except KeyError as e:
        raise SchemaLoadError(f'Missing key in schema document: {e}')
    except (TypeError, ValueError) as e:
        raise SchemaLoadError(f'Malformed schema document: {e}')

    return Structure(models=models, relations=relations)


def validate_relations(structure: Structure, indexes: UuidIndexes) -> None:
    """Check every relation points from an indexed field to an indexed model."""
    for rel in structure.relations:
        if not indexes.has_field(rel.src_field):
            raise SchemaValidationError(f'Relation references unknown field {rel.src_field!r}')
        if not indexes.has_model(rel.target_model):
            raise SchemaValidationError(f'Relation references unknown target model {rel.target_model!r}')


def _as_list(value: Any, key: str) -> list:
    if not isinstance(value, list):
        raise TypeError(f'{key!r} must be a list')
    return value


def _as_str(raw: Dict[str, Any], key: str) -> str:
    value = raw[key]
    if not isinstance(value, str):
        raise TypeError(f'{key!r} must be a string, got {type(value).__name__}')
    return value


def _parse_meta_data(raw: Dict[str, Any]) -> MetaData:
    code = raw['code']
    line_number = code['line_number']
    # bool is an int subclass
    if not isinstance(line_number, int) or isinstance(line_number, bool):
        raise TypeError(f"'line_number' must be an integer, got {type(line_number).__name__}")

    return MetaData(uuid=_as_str(raw, 'uuid'),
                    code=SourceLocation(source_file=_as_str(code, 'source_file'), line_number=line_number))


def _parse_field(raw: Dict[str, Any]) -> Field:
    return Field(name=_as_str(raw, 'name'), meta_data=_parse_meta_data(raw['_meta_data']))


def _parse_model(raw: Dict[str, Any]) -> Model:
    return Model(model_name=_as_str(raw, 'model_name'),
                 object_name=_as_str(raw, 'object_name'),
                 app_label=_as_str(raw, 'app_label'),
                 db_table=_as_str(raw, 'db_table'),
                 fields=tuple(_parse_field(field) for field in _as_list(raw['fields'], 'fields')),
                 meta_data=_parse_meta_data(raw['_meta_data']))


def _parse_relation(raw: Dict[str, Any]) -> Relation:
    tag = _as_str(raw, 'relation_type')
    try:
        relation_type = RelationType(tag)
    except ValueError:
        raise ValueError(f'Unknown relation type {tag!r}') from None

    return Relation(src_field=_as_str(raw, 'src_field'),
                    target_model=_as_str(raw, 'target_model'),
                    relation_type=relation_type)
