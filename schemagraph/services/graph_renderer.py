"""
Graphviz DOT rendering of entity-relationship graphs.
"""

from typing import Optional

from ..models.core import Structure
from ..utils.logging_config import get_logger
from .identity_index import UuidIndexes

logger = get_logger(__name__)


def quote(value: str) -> str:
    """Quote a DOT identifier or label, escaping backslashes, double quotes and line breaks."""
    escaped = value.replace('\\', '\\\\').replace('"', '\\"').replace('\r', '\\r').replace('\n', '\\n')
    return f'"{escaped}"'


def dump_er_dot(structure: Structure,
                indexes: UuidIndexes,
                target_model: Optional[str] = None,
                filter_edges: bool = True) -> str:
    """
    Render a structure as a directed DOT graph.

    Nodes are models labelled with their object name; edges run from the model
    owning a relation's source field to the relation's target model and are
    labelled with the relation kind.

    Args:
        structure: Structure to render
        indexes: Index built over ``structure``
        target_model: Focus model UUID; only that model's node is emitted
        filter_edges: With a focus, emit only edges touching the focus model.
            When False every edge is emitted regardless of the focus.

    Returns:
        DOT document text ending with a newline

    Raises:
        FieldNotFoundError: If a relation's source field is not in ``indexes``
    """
    lines = ['digraph ER {']

    # define node
    for model in structure.models:
        if target_model is not None and model.uuid != target_model:
            continue
        lines.append(f'  {quote(model.uuid)} [label={quote(model.object_name)}];')

    # define edge
    for rel in structure.relations:
        src_model_uuid = indexes.get_model_from_field(rel.src_field)
        dst_model_uuid = rel.target_model

        if filter_edges and target_model is not None and target_model not in (src_model_uuid, dst_model_uuid):
            continue

        rel_label = quote(rel.relation_type.label)
        lines.append(f'  {quote(src_model_uuid)} -> {quote(dst_model_uuid)} [label={rel_label}];')

    lines.append('}')
    logger.debug(f'Rendered DOT graph with {len(lines) - 2} statements')
    return '\n'.join(lines) + '\n'
