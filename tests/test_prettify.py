"""
Unit tests for the prettify module.
"""
import io
import pytest
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional
from models import Parameter, ParameterType
from prettify import prettify


@dataclass
class Inner:
    count: int
    label: str


@dataclass
class Outer:
    name: str
    inner: Inner
    enabled: bool
    tags: Optional[List[str]] = None
    extra: Optional[Dict[str, str]] = None
    ref: Optional[Inner] = None
    _token: str = 'hidden'


class TestStructures:
    """Tests for dataclass rendering."""

    def test_nested_fields_in_declaration_order(self):
        value = Outer(name='db', inner=Inner(count=2, label='x'), enabled=True)

        assert prettify(value) == (
            '{\n'
            '  name: "db",\n'
            '  inner: {\n'
            '    count: 2,\n'
            '    label: "x"\n'
            '  },\n'
            '  enabled: true\n'
            '}'
        )

    def test_unset_fields_omitted(self):
        """Test None sequences, mappings and references are left out."""
        text = prettify(Outer(name='db', inner=Inner(1, 'y'), enabled=False))

        assert 'tags' not in text
        assert 'extra' not in text
        assert 'ref' not in text

    def test_private_fields_omitted(self):
        text = prettify(Outer(name='db', inner=Inner(1, 'y'), enabled=False))
        assert '_token' not in text
        assert 'hidden' not in text

    def test_empty_sequence_kept(self):
        value = Outer(name='db', inner=Inner(1, 'y'), enabled=False, tags=[])
        assert '  tags: []' in prettify(value)

    def test_parameter_model(self):
        parameter = Parameter(
            name='/examples/db/password',
            type=ParameterType.SECURE_STRING,
            value='hunter2',
            version=1,
        )

        assert prettify(parameter) == (
            '{\n'
            '  name: "/examples/db/password",\n'
            '  type: "SecureString",\n'
            '  value: "hunter2",\n'
            '  version: 1\n'
            '}'
        )

    def test_parameter_without_labels_omits_labels(self):
        """Test a response entry with no Labels key renders no labels line."""
        parameter = Parameter.from_response(
            {'Name': '/a', 'Type': 'String', 'Value': 'x', 'Version': 1}
        )

        assert 'labels' not in prettify(parameter)

    def test_parameter_with_labels(self):
        parameter = Parameter.from_response({
            'Name': '/a', 'Type': 'String', 'Value': 'x', 'Version': 2,
            'Labels': ['prod'],
        })

        assert '  labels: ["prod"]' in prettify(parameter)


class TestSpecialValues:
    """Tests for binary, buffer and time values."""

    def test_bytes_render_length_only(self):
        assert prettify(b'\x00\x01secret') == '<binary> len 8'

    def test_bytearray_render_length_only(self):
        assert prettify({'Blob': bytearray(3)}) == '{\n  Blob: <binary> len 3\n}'

    def test_file_like_renders_placeholder(self):
        assert prettify({'Body': io.BytesIO(b'abc')}) == '{\n  Body: <buffer>\n}'

    def test_datetime_renders_default_text(self):
        when = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert prettify({'LastModifiedDate': when}) == (
            '{\n  LastModifiedDate: 2024-01-02 03:04:05+00:00\n}'
        )


class TestSequences:
    """Tests for list rendering."""

    def test_short_sequence_inline(self):
        assert prettify(['a', 'b', 'c']) == '["a","b","c"]'

    def test_long_sequence_one_per_line(self):
        assert prettify({'Names': [1, 2, 3, 4]}) == (
            '{\n'
            '  Names: [\n'
            '    1,\n'
            '    2,\n'
            '    3,\n'
            '    4\n'
            '  ]\n'
            '}'
        )

    def test_sequence_of_mappings(self):
        assert prettify([{'Name': 'a'}]) == '[{\n    Name: "a"\n  }]'


class TestScalarsAndMappings:
    """Tests for scalars and dict rendering."""

    @pytest.mark.parametrize('value, expected', [
        ('say "hi"\n', '"say \\"hi\\"\\n"'),
        (True, 'true'),
        (False, 'false'),
        (42, '42'),
        (1.5, '1.5'),
        (None, '<invalid value>'),
        (ParameterType.STRING_LIST, '"StringList"'),
    ])
    def test_scalars(self, value, expected):
        assert prettify(value) == expected

    def test_mapping_keeps_insertion_order_and_none_values(self):
        assert prettify({'Version': 1, 'Tier': None}) == (
            '{\n  Version: 1,\n  Tier: <invalid value>\n}'
        )

    def test_empty_mapping(self):
        assert prettify({}) == '{\n\n}'

    def test_get_parameters_response(self):
        response = {
            'Parameters': [{'Name': '/a', 'Value': 'x', 'Version': 1}],
            'InvalidParameters': ['InvalidParamName'],
        }

        assert prettify(response) == (
            '{\n'
            '  Parameters: [{\n'
            '      Name: "/a",\n'
            '      Value: "x",\n'
            '      Version: 1\n'
            '    }],\n'
            '  InvalidParameters: ["InvalidParamName"]\n'
            '}'
        )
