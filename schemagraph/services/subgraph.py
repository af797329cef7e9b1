"""
Focus-model subgraph extraction.
"""

from typing import Tuple

from ..models.core import Structure
from ..utils.logging_config import get_logger
from .identity_index import UuidIndexes

logger = get_logger(__name__)


def extract_subgraph(structure: Structure, indexes: UuidIndexes, model_uuid: str) -> Tuple[Structure, UuidIndexes]:
    """Narrow a structure to one model and the relations pointing at it.

    The result holds the focus model as its only model and every relation whose
    target is the focus, in their original order. Many-to-many relations go
    through the same filter as every other kind. Sources of the kept relations
    usually belong to models outside the result, so their ``src_field`` does not
    resolve against the new index.

    Args:
        structure: Structure to narrow
        indexes: Index built over ``structure``
        model_uuid: UUID of the focus model

    Returns:
        Tuple of (new structure, fresh index built over it)

    Raises:
        ModelNotFoundError: If ``model_uuid`` is not a model of ``structure``
    """
    model = indexes.get_model(model_uuid)

    # TODO: expand ManyToMany relations through their intermediate join model
    relations = tuple(rel for rel in structure.relations if rel.target_model == model_uuid)

    narrowed = Structure(models=(model, ), relations=relations)
    logger.debug(f'Extracted subgraph around {model_uuid} with {len(relations)} relations')

    return narrowed, UuidIndexes(narrowed)
