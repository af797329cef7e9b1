import json

import pytest

from conftest import model_document
from schemagraph.models.core import RelationType
from schemagraph.utils.schema_loader import SchemaLoadError, SchemaValidationError, load_document, load_json


def test_load_json(schema_file):
    structure, indexes = load_json(schema_file)

    assert [model.object_name for model in structure.models] == ['A', 'B']
    assert structure.models[0].fields[0].meta_data.code.line_number == 4
    assert structure.relations[0].relation_type is RelationType.MANY_TO_ONE
    assert indexes.structure is structure
    assert indexes.get_model_from_field('10') == '1'


def test_relations_are_optional(simple_document):
    del simple_document['relations']

    structure, _ = load_document(simple_document)

    assert structure.relations == ()


def test_missing_file(tmp_path):
    with pytest.raises(SchemaLoadError, match='Cannot read'):
        load_json(tmp_path / 'missing.json')


def test_invalid_json(tmp_path):
    path = tmp_path / 'broken.json'
    path.write_text('{"models": [', encoding='utf-8')

    with pytest.raises(SchemaLoadError, match='Invalid JSON'):
        load_json(path)


@pytest.mark.parametrize('document', [[], {'relations': []}, {'models': {}}, {'models': [{'object_name': 'A'}]}])
def test_malformed_documents(document):
    with pytest.raises(SchemaLoadError):
        load_document(document)


def test_non_integer_line_number(simple_document):
    simple_document['models'][0]['_meta_data']['code']['line_number'] = '3'

    with pytest.raises(SchemaLoadError, match='line_number'):
        load_document(simple_document)


def test_unknown_relation_type(simple_document):
    simple_document['relations'][0]['relation_type'] = 'ForeignKey'

    with pytest.raises(SchemaLoadError, match='Unknown relation type'):
        load_document(simple_document)


def test_relation_to_unknown_model(simple_document):
    simple_document['relations'][0]['target_model'] = '99'

    with pytest.raises(SchemaValidationError, match='target model'):
        load_document(simple_document)


def test_relation_from_unknown_field(simple_document):
    simple_document['relations'][0]['src_field'] = '99'

    with pytest.raises(SchemaValidationError, match='unknown field'):
        load_document(simple_document)


def test_duplicate_uuid_is_a_load_error(simple_document):
    simple_document['models'].append(model_document('1', 'C'))

    with pytest.raises(SchemaLoadError, match='Duplicate model uuid'):
        load_document(simple_document)


def test_round_trip_through_file(tmp_path, simple_document):
    path = tmp_path / 'schema.json'
    path.write_text(json.dumps(simple_document, indent=2), encoding='utf-8')

    structure, _ = load_json(str(path))

    assert structure.models[1].meta_data.code.line_number == 9


def test_invalid_encoding(tmp_path):
    path = tmp_path / 'latin.json'
    path.write_bytes(b'{"models": [], "x": "\xff\xfe"}')

    with pytest.raises(SchemaLoadError, match='Invalid encoding'):
        load_json(path)
