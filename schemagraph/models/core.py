"""
Core data models for the schema graph.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class RelationType(Enum):
    """Kind of association a relation describes between two models."""
    ONE_TO_ONE = 'OneToOne'
    ONE_TO_MANY = 'OneToMany'
    MANY_TO_ONE = 'ManyToOne'
    MANY_TO_MANY = 'ManyToMany'

    @property
    def label(self) -> str:
        """Textual tag used in the input document and as the rendered edge label."""
        return self.value


@dataclass(frozen=True)
class SourceLocation:
    """Where an entity was declared in the producing code base."""
    source_file: str
    line_number: int


@dataclass(frozen=True)
class MetaData:
    """Identity plus provenance attached to a model or a field.

    Provenance is informational only and never used for lookups.
    """
    uuid: str  # Assigned by the producing system, unique within a schema
    code: SourceLocation


@dataclass(frozen=True)
class Field:
    """One attribute declared by exactly one model."""
    name: str
    meta_data: MetaData

    @property
    def uuid(self) -> str:
        return self.meta_data.uuid


@dataclass(frozen=True)
class Model:
    """One schema entity, loosely a database table."""
    model_name: str
    object_name: str  # Display name, also indexed for lookups
    app_label: str
    db_table: str
    fields: Tuple[Field, ...]
    meta_data: MetaData

    @property
    def uuid(self) -> str:
        return self.meta_data.uuid


@dataclass(frozen=True)
class Relation:
    """Directed edge from a field to the model it references.

    Only identifiers are stored so structures can be narrowed without carrying
    object references along.
    """
    src_field: str  # Field UUID
    target_model: str  # Model UUID
    relation_type: RelationType


@dataclass(frozen=True)
class Structure:
    """Immutable snapshot of a schema: its models and the relations between them."""
    models: Tuple[Model, ...] = ()
    relations: Tuple[Relation, ...] = ()

    def iter_fields(self) -> Iterator[Tuple[Model, Field]]:
        """Yield every (owning model, field) pair in declaration order."""
        for model in self.models:
            for field in model.fields:
                yield model, field
