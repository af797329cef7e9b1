import json
from pathlib import Path

import pytest

from schemagraph.models.core import Field, MetaData, Model, Relation, RelationType, SourceLocation, Structure
from schemagraph.services.identity_index import UuidIndexes


def make_meta(uuid, line=1, source_file='app/models.py'):
    return MetaData(uuid=uuid, code=SourceLocation(source_file=source_file, line_number=line))


def make_model(uuid, name, fields=(), app_label='app', db_table=None):
    return Model(model_name=name.lower(),
                 object_name=name,
                 app_label=app_label,
                 db_table=db_table or f'{app_label}_{name.lower()}',
                 fields=tuple(
                     Field(name=field_name, meta_data=make_meta(field_uuid)) for field_uuid, field_name in fields),
                 meta_data=make_meta(uuid))


@pytest.fixture()
def simple_structure():
    """A(1) with field f1(10) pointing at B(2)."""
    model_a = make_model('1', 'A', fields=[('10', 'f1')])
    model_b = make_model('2', 'B')
    relation = Relation(src_field='10', target_model='2', relation_type=RelationType.MANY_TO_ONE)
    return Structure(models=(model_a, model_b), relations=(relation, ))


@pytest.fixture()
def simple_indexes(simple_structure):
    return UuidIndexes(simple_structure)


@pytest.fixture()
def library_structure():
    """Author, Book and Tag with relations between all of them."""
    author = make_model('m-author', 'Author', fields=[('f-author-id', 'id'), ('f-author-name', 'name')])
    book = make_model('m-book',
                      'Book',
                      fields=[('f-book-id', 'id'), ('f-book-author', 'author'), ('f-book-tags', 'tags'),
                              ('f-book-editor', 'editor')])
    tag = make_model('m-tag', 'Tag', fields=[('f-tag-id', 'id'), ('f-tag-parent', 'parent')])
    relations = (
        Relation(src_field='f-book-author', target_model='m-author', relation_type=RelationType.MANY_TO_ONE),
        Relation(src_field='f-book-tags', target_model='m-tag', relation_type=RelationType.MANY_TO_MANY),
        Relation(src_field='f-tag-parent', target_model='m-tag', relation_type=RelationType.MANY_TO_ONE),
        Relation(src_field='f-book-editor', target_model='m-author', relation_type=RelationType.ONE_TO_ONE),
    )
    return Structure(models=(author, book, tag), relations=relations)


@pytest.fixture()
def library_indexes(library_structure):
    return UuidIndexes(library_structure)


def model_document(uuid, name, fields=(), line=1):
    return {
        'model_name': name.lower(),
        'object_name': name,
        'app_label': 'app',
        'db_table': f'app_{name.lower()}',
        '_meta_data': {
            'uuid': uuid,
            'code': {
                'source_file': 'app/models.py',
                'line_number': line
            }
        },
        'fields': [{
            'name': field_name,
            '_meta_data': {
                'uuid': field_uuid,
                'code': {
                    'source_file': 'app/models.py',
                    'line_number': line + i + 1
                }
            }
        } for i, (field_uuid, field_name) in enumerate(fields)],
    }


@pytest.fixture()
def simple_document():
    return {
        'models': [model_document('1', 'A', fields=[('10', 'f1')], line=3),
                   model_document('2', 'B', line=9)],
        'relations': [{
            'src_field': '10',
            'target_model': '2',
            'relation_type': 'ManyToOne'
        }],
    }


@pytest.fixture()
def schema_file(tmp_path: Path, simple_document):
    path = tmp_path / 'schema.json'
    path.write_text(json.dumps(simple_document), encoding='utf-8')
    return path
