"""
UUID and name indexes over a schema structure.
"""

from types import MappingProxyType
from typing import Dict, Mapping

from ..models.core import Model, Structure
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


class IdentityIndexError(Exception):
    """Custom exception for identity index errors."""
    pass


class DuplicateIdentifierError(IdentityIndexError):
    """Raised when two entities of a structure share an identifier."""

    def __init__(self, kind: str, value: str):
        self.kind = kind
        self.value = value
        super().__init__(f'Duplicate {kind} {value!r} in schema')


class ModelNotFoundError(IdentityIndexError):
    """Raised when a model name or UUID has no match in the index."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f'no match {key} in models')


class FieldNotFoundError(IdentityIndexError):
    """Raised when a field UUID was never indexed."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f'no match {key} in fields')


class UuidIndexes:
    """Read-only lookup tables built from exactly one structure snapshot.

    Holds three tables: model UUID -> model, display name -> model and
    field UUID -> owning model UUID. An index must be rebuilt, never patched,
    for every new structure.
    """

    def __init__(self, structure: Structure):
        """
        Build all indexes in a single pass over the structure.

        Args:
            structure: Snapshot to index; kept as the ``structure`` attribute

        Raises:
            DuplicateIdentifierError: If a model UUID, model name or field UUID
                appears more than once
        """
        self.structure = structure

        models: Dict[str, Model] = {}
        model_names: Dict[str, Model] = {}
        fields: Dict[str, str] = {}

        for model in structure.models:
            if model.uuid in models:
                raise DuplicateIdentifierError('model uuid', model.uuid)
            if model.object_name in model_names:
                raise DuplicateIdentifierError('model name', model.object_name)
            models[model.uuid] = model
            model_names[model.object_name] = model

            for field in model.fields:
                if field.uuid in fields:
                    raise DuplicateIdentifierError('field uuid', field.uuid)
                fields[field.uuid] = model.uuid

        self._models = MappingProxyType(models)
        self._model_names = MappingProxyType(model_names)
        self._fields = MappingProxyType(fields)

        logger.debug(f'Indexed {len(models)} models and {len(fields)} fields')

    def has_model(self, uuid: str) -> bool:
        return uuid in self._models

    def has_model_name(self, name: str) -> bool:
        return name in self._model_names

    def has_field(self, uuid: str) -> bool:
        return uuid in self._fields

    def get_model(self, uuid: str) -> Model:
        """Return the model with the given UUID.

        Raises:
            ModelNotFoundError: If the UUID is not indexed
        """
        try:
            return self._models[uuid]
        except KeyError:
            raise ModelNotFoundError(uuid) from None

    def get_model_by_name(self, name: str) -> Model:
        """Return the model with the given display name.

        Raises:
            ModelNotFoundError: If the name is not indexed
        """
        try:
            return self._model_names[name]
        except KeyError:
            raise ModelNotFoundError(name) from None

    def get_model_from_field(self, field_uuid: str) -> str:
        """Return the UUID of the model declaring the given field.

        Raises:
            FieldNotFoundError: If the field UUID is not indexed
        """
        try:
            return self._fields[field_uuid]
        except KeyError:
            raise FieldNotFoundError(field_uuid) from None

    def get_models(self) -> Mapping[str, Model]:
        return self._models

    def get_fields(self) -> Mapping[str, str]:
        return self._fields

    def resolve_model(self, name_or_uuid: str) -> Model:
        """Resolve user input that may be either a display name or a UUID.

        Names win over UUIDs, so a name that looks like a UUID still resolves
        as a name.

        Args:
            name_or_uuid: Display name or UUID

        Returns:
            Matching model

        Raises:
            ModelNotFoundError: If neither table has a match
        """
        if self.has_model_name(name_or_uuid):
            return self._model_names[name_or_uuid]
        if self.has_model(name_or_uuid):
            return self._models[name_or_uuid]
        raise ModelNotFoundError(name_or_uuid)