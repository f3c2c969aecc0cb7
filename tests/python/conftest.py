"""
Pytest configuration and shared fixtures for marcdc tests.
"""

import pytest
from pathlib import Path

from marcdc import ControlField, Field, Record

SANDBURG_LEADER = '01142cam  2200301 a 4500'
SANDBURG_008 = '920219s1993    caua   j      000 0 eng  '


@pytest.fixture(scope="session")
def data_dir():
    """Return path to test data directory."""
    return Path(__file__).parent.parent / "data"


@pytest.fixture(scope="session")
def sandburg_xml_path(data_dir):
    """MARC-XML for LC's "Arithmetic" by Carl Sandburg sample record."""
    path = data_dir / "marc21-sandburg.xml"
    if not path.exists():
        pytest.skip(f"Fixture not found: {path}")
    return path


@pytest.fixture(scope="session")
def sandburg_mrc_path(sandburg_xml_path, tmp_path_factory):
    """The Sandburg record serialized to ISO 2709 by pymarc."""
    import pymarc

    records = pymarc.parse_xml_to_array(str(sandburg_xml_path))
    path = tmp_path_factory.mktemp("marc") / "sandburg.mrc"
    with open(path, 'wb') as f:
        for record in records:
            f.write(record.as_marc())
    return path


@pytest.fixture
def make_record():
    """Build a Record from a leader, control fields and (tag, subfields) pairs.

    Example:
        make_record(controls={'008': '...'}, fields=[('245', [('a', 'Title')])])
    """
    def _make(leader=SANDBURG_LEADER, controls=None, fields=()):
        all_fields = [ControlField(tag, value) for tag, value in (controls or {}).items()]
        all_fields.extend(Field(tag, subfields=subfields) for tag, subfields in fields)
        return Record(leader, fields=all_fields)
    return _make


@pytest.fixture
def sandburg_record():
    """The Sandburg sample record built in memory (no decoder involved)."""
    return Record(SANDBURG_LEADER, fields=[
        ControlField('001', '   92005291 '),
        ControlField('003', 'DLC'),
        ControlField('008', SANDBURG_008),
        Field('020', subfields=[('a', '0152038655 :'), ('c', '$15.95')]),
        Field('100', ('1', ' '), [('a', 'Sandburg, Carl,'), ('d', '1878-1967.')]),
        Field('245', ('1', '0'), [
            ('a', 'Arithmetic /'),
            ('c', 'Carl Sandburg ; illustrated as an anamorphic adventure by Ted Rand.'),
        ]),
        Field('250', subfields=[('a', '1st ed.')]),
        Field('260', subfields=[
            ('a', 'San Diego :'), ('b', 'Harcourt Brace Jovanovich,'), ('c', 'c1993.'),
        ]),
        Field('500', subfields=[('a', 'One Mylar sheet included in pocket.')]),
        Field('520', subfields=[('a', 'A poem about numbers and their characteristics.')]),
        Field('650', (' ', '0'), [('a', 'Arithmetic'), ('x', 'Juvenile poetry.')]),
        Field('700', ('1', ' '), [('a', 'Rand, Ted,'), ('e', 'ill.')]),
    ])
