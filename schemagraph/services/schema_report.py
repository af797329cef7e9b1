"""
Plain-text listings of models and fields.
"""

from typing import List

from ..models.core import MetaData, Model, Structure


def enumerate_structure(structure: Structure, show_uuid: bool = False) -> List[str]:
    """List every model followed by its fields, in structure order.

    Args:
        structure: Structure to list
        show_uuid: Prefix each name with the entity UUID

    Returns:
        One ``[M]`` line per model and one ``[F]`` line per field
    """
    lines = []

    for model in structure.models:
        if show_uuid:
            lines.append(f'[M] {model.uuid}: {model.object_name}')
        else:
            lines.append(f'[M] {model.object_name}')

        for field in model.fields:
            if show_uuid:
                lines.append(f'[F] {field.uuid}: {field.name}')
            else:
                lines.append(f'[F] {field.name}')

    return lines


def describe_model(model: Model, show_meta: bool = False) -> List[str]:
    """Report a model's attributes, optionally followed by its metadata."""
    lines = [
        f'model name: {model.model_name}',
        f'object name: {model.object_name}',
        f'app label: {model.app_label}',
        f'db table: {model.db_table}',
        f'fields: {len(model.fields)}',
    ]

    if show_meta:
        lines.extend(describe_meta_data(model.meta_data))

    return lines


def describe_meta_data(meta_data: MetaData) -> List[str]:
    return [
        f'uuid: {meta_data.uuid}',
        f'source file: {meta_data.code.source_file}',
        f'source line: {meta_data.code.line_number}',
    ]
