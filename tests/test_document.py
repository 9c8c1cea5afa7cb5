"""
Tests for the YamlEdit Document class.
"""

import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from YamlEdit.document import Document
from YamlEdit.document.codec import dump_yaml
from YamlEdit.document.tree import NodeKind, clone_tree, node_kind
from YamlEdit.exceptions import (
    InvalidPathError,
    ParseError,
    PathNotFoundError,
    UnsupportedPathError,
    YamlEditError,
)

TESTFILE = os.path.join(os.path.dirname(__file__), 'data', 'sample.yaml')
GEONAMES_PATH = r'$.oai.|^https?://([^\.]*[\.])?geonames[\.]org/([0-9]+)(/\.*)?$|'

OAI_DC = {
    'metadataPrefix': 'oai_dc',
    'schema': 'http://www.openarchives.org/OAI/2.0/oai_dc.xsd',
    'metadataNamespace': 'http://www.openarchives.org/OAI/2.0/oai_dc/',
    'class': '\\acdhOeaw\\oai\\metadata\\DcMetadata',
}


class TestTree(unittest.TestCase):
    """Test cases for the tree helpers."""

    def test_node_kind(self):
        self.assertIs(node_kind({}), NodeKind.OBJECT)
        self.assertIs(node_kind([1]), NodeKind.SEQUENCE)
        self.assertIs(node_kind((1,)), NodeKind.SEQUENCE)
        self.assertIs(node_kind("abc"), NodeKind.SCALAR)
        self.assertIs(node_kind(None), NodeKind.SCALAR)

    def test_clone_tree_is_independent(self):
        original = {'a': [1, {'b': 2}]}
        copied = clone_tree(original)
        copied['a'][1]['b'] = 3
        copied['a'].append(4)
        self.assertEqual(original, {'a': [1, {'b': 2}]})

    def test_clone_tree_normalizes(self):
        self.assertEqual(clone_tree({1: 'a', None: 'b', 2.5: 'c'}), {'1': 'a', 'null': 'b', '2.5': 'c'})
        self.assertEqual(clone_tree({'t': (1, 2)}), {'t': [1, 2]})

    def test_clone_tree_rejects_foreign_values(self):
        for value in ({1, 2}, {'a': [object()]}, frozenset(), Path('x.yaml')):
            with self.assertRaises(ParseError):
                clone_tree(value)


class _Custom:
    pass


class TestDocumentConstruction(unittest.TestCase):
    """Test cases for creating documents from the supported sources."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_from_file(self):
        doc = Document(TESTFILE)
        self.assertEqual(doc.get('$.oai.repoBaseUrl'), 'http://127.0.0.1/rest/')

        self.assertEqual(Document(Path(TESTFILE)), doc)
        self.assertEqual(Document.from_file(TESTFILE), doc)
        self.assertEqual(Document.from_source(TESTFILE), doc)

    def test_from_missing_file(self):
        with self.assertRaises(ParseError):
            Document.from_file(os.path.join(self.temp_dir, 'missing.yaml'))
        with self.assertRaises(ParseError):
            Document(Path(self.temp_dir) / 'missing.yaml')

    def test_from_json_file(self):
        path = os.path.join(self.temp_dir, 'data.json')
        with open(path, 'w') as f:
            f.write('{\n\t"a": {"b": [1, 2]}\n}\n')

        self.assertEqual(Document(path).to_dict(), {'a': {'b': [1, 2]}})

    def test_from_string(self):
        with open(TESTFILE) as f:
            text = f.read()
        self.assertEqual(Document(text), Document(TESTFILE))

        self.assertEqual(str(Document('')), "--- {}\n...\n")
        self.assertEqual(str(Document()), "--- {}\n...\n")
        self.assertEqual(str(Document('{"x": 123}')), "---\nx: 123\n...\n")

    def test_from_text_never_reads_files(self):
        with self.assertRaises(ParseError):
            Document.from_text(TESTFILE)
        self.assertEqual(Document.from_text('a: 1').to_dict(), {'a': 1})
        self.assertEqual(Document.from_text('').to_dict(), {})

    def test_json_before_yaml(self):
        # Valid JSON and valid YAML at the same time
        doc = Document('{"a": 1e3}')
        self.assertEqual(doc.get('$.a'), 1000.0)

        doc = Document('a: 1\nb: [x, y]')
        self.assertEqual(doc.to_dict(), {'a': 1, 'b': ['x', 'y']})

    def test_empty_sources(self):
        for source in (None, '', '   \n', 'null', '~', {}):
            self.assertEqual(Document(source).to_dict(), {})

    def test_invalid_text(self):
        with self.assertRaises(ParseError):
            Document('a: [1, 2')

    def test_root_must_be_mapping(self):
        for source in ('- a\n- b', '[1, 2]', '123', 'just some text'):
            with self.assertRaises(ParseError):
                Document(source)

    def test_unsupported_source_type(self):
        for source in (123, [1, 2], object()):
            with self.assertRaises(ParseError):
                Document(source)

    def test_from_document_is_a_copy(self):
        doc1 = Document(TESTFILE)
        doc2 = Document(doc1)
        doc1.set('$.oai.repoBaseUrl', 123)

        self.assertEqual(doc2, Document(TESTFILE))
        self.assertNotEqual(str(doc1), str(doc2))

        doc2.set('$.oai.formats.oai_dc.metadataPrefix', 'changed')
        self.assertEqual(doc1.get('$.oai.formats.oai_dc.metadataPrefix'), 'oai_dc')

    def test_from_mapping_is_a_copy(self):
        data = {'a': {'b': 1, 'l': [1]}}
        doc = Document(data)
        data['a']['b'] = 2
        data['a']['l'].append(2)

        self.assertEqual(doc.get('$.a'), {'b': 1, 'l': [1]})

    def test_from_get_result(self):
        doc1 = Document(TESTFILE)
        data = doc1.get()
        doc2 = Document(data)
        self.assertEqual(str(doc2), str(doc1))

        data['oai']['repoBaseUrl'] = 123
        self.assertEqual(str(doc2), str(doc1))


class TestDocumentGet(unittest.TestCase):
    """Test cases for reading values."""

    def setUp(self):
        self.doc = Document(TESTFILE)

    def test_get(self):
        self.assertEqual(self.doc.get('$.oai.repoBaseUrl'), 'http://127.0.0.1/rest/')
        self.assertEqual(self.doc.get('$.oai.formats.oai_dc'), OAI_DC)
        self.assertEqual(self.doc.get('$.oai.sets')[1], {'spec': 'people', 'name': 'People'})

    def test_get_root(self):
        self.assertEqual(self.doc.get(), self.doc.to_dict())
        self.assertEqual(self.doc.get('$'), self.doc.to_dict())
        self.assertEqual(self.doc.get('$.'), self.doc.to_dict())

    def test_get_escaped(self):
        self.assertEqual(self.doc.get(GEONAMES_PATH), 'https://www.geonames.org/\\2')

    def test_get_returns_copy(self):
        formats = self.doc.get('$.oai.formats')
        formats['oai_dc']['metadataPrefix'] = 'changed'
        self.doc.get('$.oai.sets').append('extra')

        self.assertEqual(self.doc.get('$.oai.formats.oai_dc.metadataPrefix'), 'oai_dc')
        self.assertEqual(len(self.doc.get('$.oai.sets')), 2)

    def test_get_null_value(self):
        self.assertIsNone(self.doc.get('$.oai.cache'))
        self.assertTrue(self.doc.has('$.oai.cache'))

    def test_nonexisting_path(self):
        with self.assertRaises(PathNotFoundError):
            self.doc.get('$.oai.bbb.ccc')
        with self.assertRaises(PathNotFoundError):
            Document('').get('$.nope.deep')

    def test_no_traversal_through_leaves(self):
        with self.assertRaises(PathNotFoundError):
            self.doc.get('$.oai.sets.0')
        with self.assertRaises(PathNotFoundError):
            self.doc.get('$.oai.repoBaseUrl.x')

    def test_unsupported_path(self):
        with self.assertRaises(UnsupportedPathError):
            self.doc.get('')
        with self.assertRaises(UnsupportedPathError):
            self.doc.get('a.b')

    def test_get_default(self):
        self.assertEqual(self.doc.get('$.oai.bbb.ccc', 'fallback'), 'fallback')
        self.assertIsNone(self.doc.get('$.nope', None))
        self.assertFalse(self.doc.has('$.oai.bbb'))
        self.assertTrue(self.doc.has('$.oai.formats.acdhdc'))


class TestDocumentSet(unittest.TestCase):
    """Test cases for writing values."""

    def setUp(self):
        self.doc = Document(TESTFILE)

    def test_set_scalar(self):
        self.doc.set('$.oai.formats.acdhdc.metadataPrefix', 123)
        self.assertEqual(self.doc.get('$.oai.formats.acdhdc.metadataPrefix'), 123)
        self.assertEqual(self.doc.get('$.oai.formats.acdhdc.class'), '\\acdhOeaw\\oai\\metadata\\AcdhDcMetadata')

    def test_set_object(self):
        data = {'a': 12, 'v': 'abd'}
        self.doc.set('$.oai.formats.acdhdc.metadataPrefix', data)
        self.assertEqual(self.doc.get('$.oai.formats.acdhdc.metadataPrefix'), data)

    def test_replace_object_with_scalar(self):
        self.doc.set('$.oai.formats.acdhdc', 123)
        self.assertEqual(self.doc.get('$.oai.formats.acdhdc'), 123)

        self.doc.set('$.oai.formats.acdhdc', {'a': 12})
        self.assertEqual(self.doc.get('$.oai.formats.acdhdc'), {'a': 12})

    def test_set_creates_new_path(self):
        path = '$.oai.formats.acdhdc.metadataPrefix.completely.new.path'
        self.doc.set(path, 123)
        self.assertEqual(self.doc.get(path), 123)
        self.assertEqual(self.doc.get('$.oai.formats.acdhdc.metadataPrefix'), {'completely': {'new': {'path': 123}}})

        doc = Document()
        doc.set('$.a.b.c', [1, 2])
        self.assertEqual(doc.to_dict(), {'a': {'b': {'c': [1, 2]}}})

    def test_set_replaces_sequence_on_the_way(self):
        self.doc.set('$.oai.sets.first', 'x')
        self.assertEqual(self.doc.get('$.oai.sets'), {'first': 'x'})

    def test_set_escaped(self):
        self.doc.set(GEONAMES_PATH, 'foo')
        self.assertEqual(self.doc.get(GEONAMES_PATH), 'foo')

        doc = Document()
        doc.set(r'$.hosts.example\.org.port', 80)
        self.assertEqual(doc.to_dict(), {'hosts': {'example.org': {'port': 80}}})

    def test_set_invariance(self):
        data = {'a': 12, 'v': 'abd', 'l': [1]}
        self.doc.set('$.oai.formats.acdhdc.metadataPrefix', data)
        data['a'] = 'xyz'
        data['l'].append(2)

        self.assertEqual(self.doc.get('$.oai.formats.acdhdc.metadataPrefix.a'), 12)
        self.assertEqual(self.doc.get('$.oai.formats.acdhdc.metadataPrefix.l'), [1])

    def test_set_document(self):
        self.doc.set('$.copy', Document('a: 1'))
        self.assertEqual(self.doc.get('$.copy'), {'a': 1})

    def test_strings_are_stored_literally(self):
        self.doc.set('$.x', 'b: 1')
        self.assertEqual(self.doc.get('$.x'), 'b: 1')

        self.doc.set('$.y', '123')
        self.assertEqual(self.doc.get('$.y'), '123')

    def test_parse_text(self):
        self.doc.set('$.x', 'b: 1', parse_text=True)
        self.assertEqual(self.doc.get('$.x'), {'b': 1})

        self.doc.set('$.y', '[1, 2]', parse_text=True)
        self.assertEqual(self.doc.get('$.y'), [1, 2])

    def test_get_set_inverse(self):
        values = [0, 1.5, 'text', '', None, True, [1, [2, {'a': 3}]], {'a': {'b': None}}, 'a: b']
        for value in values:
            self.doc.set('$.some.new.key', value)
            self.assertEqual(self.doc.get('$.some.new.key'), value)

    def test_invalid_paths(self):
        with self.assertRaises(InvalidPathError):
            self.doc.set('$.', 1)
        with self.assertRaises(InvalidPathError):
            self.doc.set('$', 1)
        with self.assertRaises(InvalidPathError):
            self.doc.set('$.a.', 1)
        with self.assertRaises(UnsupportedPathError):
            self.doc.set('oai.x', 1)

    def test_failed_set_leaves_document_unchanged(self):
        before = self.doc.to_dict()
        with self.assertRaises(ParseError):
            self.doc.set('$.new.deep.path', 'a: [1', parse_text=True)
        self.assertEqual(self.doc.to_dict(), before)

    def test_values_outside_the_tree_model(self):
        before = self.doc.to_dict()
        with self.assertRaises(ParseError):
            self.doc.set('$.new.deep.path', {1, 2})
        with self.assertRaises(ParseError):
            self.doc.merge({'a': 1, 'b': _Custom()})
        self.assertEqual(self.doc.to_dict(), before)

        with self.assertRaises(ParseError):
            Document({'x': _Custom()})


class TestDocumentSerialization(unittest.TestCase):
    """Test cases for YAML output."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_json_input_serializes_as_yaml(self):
        doc = Document('{"a": {"b": [1, 2]}, "c": "d"}')
        self.assertEqual(str(doc), "---\na:\n  b:\n  - 1\n  - 2\nc: d\n...\n")

    def test_insertion_order_kept(self):
        doc = Document('{"z": 1, "a": 2}')
        doc.set('$.m', 3)
        self.assertEqual(doc.dump(), "---\nz: 1\na: 2\nm: 3\n...\n")

    def test_dump_options(self):
        doc = Document('{"x": 123}')
        self.assertEqual(doc.dump(explicit_end=False), "---\nx: 123\n")

    def test_round_trip(self):
        for doc in (Document(TESTFILE), Document(), Document({'a': [1, {'b': None}], 'c': 'x: y'})):
            text = str(doc)
            self.assertEqual(str(Document(text)), text)
            self.assertEqual(str(doc), text)

    def test_write_file(self):
        doc = Document(TESTFILE)
        out = os.path.join(self.temp_dir, 'out.yaml')
        doc.write_file(out)

        with open(out) as f:
            self.assertEqual(f.read(), str(doc))
        self.assertEqual(Document(out), doc)

    def test_write_file_keeps_permissions(self):
        out = os.path.join(self.temp_dir, 'out.yaml')
        with open(out, 'w') as f:
            f.write("a: 1\n")
        os.chmod(out, 0o640)

        Document('b: 2').write_file(out)

        self.assertEqual(os.stat(out).st_mode & 0o777, 0o640)
        self.assertEqual(Document(out).to_dict(), {'b': 2})
        self.assertEqual(os.listdir(self.temp_dir), ['out.yaml'])

    def test_failed_write_keeps_previous_content(self):
        out = os.path.join(self.temp_dir, 'out.yaml')
        with open(out, 'w') as f:
            f.write("a: 1\n")

        with mock.patch('YamlEdit.document.codec.os.replace', side_effect=OSError("No space left on device")):
            with self.assertRaises(YamlEditError):
                Document('b: 2').write_file(out)

        with open(out) as f:
            self.assertEqual(f.read(), "a: 1\n")
        self.assertEqual(os.listdir(self.temp_dir), ['out.yaml'])

    def test_write_into_missing_directory(self):
        with self.assertRaises(YamlEditError):
            Document('a: 1').write_file(os.path.join(self.temp_dir, 'missing', 'out.yaml'))

    def test_unrepresentable_tree(self):
        with self.assertRaises(YamlEditError):
            dump_yaml({'a': object()})


if __name__ == "__main__":
    unittest.main()
