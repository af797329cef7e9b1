"""
Schema Inspection Service combining lookups, extraction, rendering and reports.
"""

from pathlib import Path
from typing import Optional, Union

from ..models.core import Structure
from ..utils.config import config
from ..utils.logging_config import get_logger
from ..utils.schema_loader import load_json
from .graph_renderer import dump_er_dot
from .identity_index import UuidIndexes
from .schema_report import describe_model, enumerate_structure
from .subgraph import extract_subgraph

logger = get_logger(__name__)


class SchemaInspectionService:
    """Unified service for inspecting one loaded schema snapshot."""

    def __init__(self, structure: Structure, indexes: Optional[UuidIndexes] = None):
        """
        Initialize the service over a structure.

        Args:
            structure: Schema snapshot to inspect
            indexes: Index built over ``structure``; built here when omitted
        """
        if indexes is not None and indexes.structure is not structure:
            raise ValueError('Index was built over a different structure')

        self.structure = structure
        self.indexes = indexes if indexes is not None else UuidIndexes(structure)
        logger.debug(f'Initialized SchemaInspectionService with {len(structure.models)} models')

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'SchemaInspectionService':
        """Load a schema JSON file and wrap it in a service.

        Raises:
            SchemaLoadError: If the file cannot be loaded
        """
        structure, indexes = load_json(path)
        return cls(structure, indexes)

    def enumerate(self, show_uuid: bool = False, model: Optional[str] = None) -> str:
        """List models and fields, narrowed to one model when ``model`` is given.

        Args:
            show_uuid: Prefix names with UUIDs
            model: Focus model display name or UUID

        Returns:
            Listing text, one entry per line

        Raises:
            ModelNotFoundError: If ``model`` does not match any model
        """
        structure, indexes = self.structure, self.indexes
        if model is not None:
            focus = indexes.resolve_model(model)
            structure, indexes = extract_subgraph(structure, indexes, focus.uuid)

        return '\n'.join(enumerate_structure(structure, show_uuid)) + '\n'

    def render_dot(self, model: Optional[str] = None, filter_edges: Optional[bool] = None) -> str:
        """Render the entity-relationship graph as DOT.

        Args:
            model: Focus model display name or UUID
            filter_edges: Drop edges not touching the focus; defaults to config

        Raises:
            ModelNotFoundError: If ``model`` does not match any model
        """
        if filter_edges is None:
            filter_edges = config.schema.filter_focus_edges

        target_model = None
        if model is not None:
            target_model = self.indexes.resolve_model(model).uuid

        return dump_er_dot(self.structure, self.indexes, target_model=target_model, filter_edges=filter_edges)

    def describe(self, model: str, show_meta: bool = False) -> str:
        """Report one model's attributes.

        Raises:
            ModelNotFoundError: If ``model`` does not match any model
        """
        found = self.indexes.resolve_model(model)
        return '\n'.join(describe_model(found, show_meta)) + '\n'
