"""
End-to-end tests for MARC to Dublin Core conversion.
"""

import pytest
import marcdc
from marcdc import DublinCore, MarcToDublinCore, convert, convert_batch

SUMMARY = (
    "A poem about numbers and their characteristics. Features anamorphic, or distorted, "
    "drawings which can be restored to normal by viewing from a particular angle or by "
    "viewing the image's reflection in the provided Mylar cone."
)


@pytest.fixture(scope="module")
def sandburg_dc(sandburg_xml_path):
    """Dublin Core for the Sandburg record decoded from MARC-XML."""
    record = next(marcdc.read(sandburg_xml_path))
    return MarcToDublinCore(record).convert()


class TestSandburgRecord:
    """The "Arithmetic" sample record, decoded from MARC-XML."""

    def test_creators(self, sandburg_dc):
        assert sandburg_dc.creators == ("Sandburg, Carl, 1878-1967.", "Rand, Ted, ill.")

    def test_dates(self, sandburg_dc):
        assert sandburg_dc.dates == ("c1993.",)

    def test_descriptions(self, sandburg_dc):
        assert sandburg_dc.descriptions == (SUMMARY, "One Mylar sheet included in pocket.")

    def test_identifiers(self, sandburg_dc):
        assert sandburg_dc.identifiers == ("URN:ISBN:0152038655 :",)

    def test_language(self, sandburg_dc):
        assert sandburg_dc.language == "eng"

    def test_publishers(self, sandburg_dc):
        assert sandburg_dc.publishers == ("San Diego : Harcourt Brace Jovanovich,",)

    def test_titles(self, sandburg_dc):
        assert sandburg_dc.titles == ("Arithmetic /",)
        assert sandburg_dc.title == "Arithmetic /"

    def test_type(self, sandburg_dc):
        assert sandburg_dc.type == "text"

    def test_subjects_unmapped(self, sandburg_dc):
        """650 headings are present but subjects stay None."""
        assert sandburg_dc.subjects is None


class TestConversionProperties:
    """Properties that hold for any record."""

    def test_idempotent(self, sandburg_record):
        """Converting the same record twice gives equal results."""
        assert convert(sandburg_record) == convert(sandburg_record)

    def test_empty_record(self, make_record):
        """Nothing present: every element None, type empty."""
        dc = convert(make_record(leader=''))
        assert dc == DublinCore()
        assert dc.type == ''

    def test_short_008_does_not_abort(self, sandburg_record, make_record):
        """A short 008 only loses the language."""
        record = make_record(
            controls={'008': '920219s1993    caua'},
            fields=[(f.tag, f.subfields) for f in sandburg_record.fields()],
        )
        dc = convert(record)
        assert dc.language is None
        assert dc.titles == ("Arithmetic /",)
        assert dc.type == "text"

    def test_missing_008(self, make_record):
        dc = convert(make_record(fields=[('245', [('a', 'Untitled')])]))
        assert dc.language is None
        assert dc.titles == ('Untitled',)

    def test_short_leader_does_not_abort(self, make_record):
        dc = convert(make_record(leader='01', fields=[('245', [('a', 'Untitled')])]))
        assert dc.type == ''
        assert dc.titles == ('Untitled',)

    def test_as_dict(self, sandburg_record):
        data = convert(sandburg_record).as_dict()
        assert list(data) == [
            'creators', 'dates', 'descriptions', 'identifiers', 'language',
            'publishers', 'subjects', 'titles', 'type',
        ]
        assert data['language'] == 'eng'


class TestDublinCore:
    """Test the value object invariants."""

    def test_frozen(self):
        dc = DublinCore(titles=('A',))
        with pytest.raises(AttributeError):
            dc.titles = ('B',)

    def test_lists_become_tuples(self):
        assert DublinCore(creators=['A', 'B']).creators == ('A', 'B')

    def test_empty_sequence_rejected(self):
        with pytest.raises(ValueError):
            DublinCore(dates=())

    def test_string_sequence_rejected(self):
        with pytest.raises(TypeError):
            DublinCore(titles='Arithmetic /')

    def test_type_never_none(self):
        with pytest.raises(ValueError):
            DublinCore(type=None)


class TestConvertBatch:
    """Test thread-pool batch conversion."""

    def test_order_preserved(self, make_record):
        records = [make_record(fields=[('245', [('a', f'Title {i}')])]) for i in range(20)]
        results = convert_batch(records, max_workers=4)
        assert [dc.title for dc in results] == [f'Title {i}' for i in range(20)]

    def test_empty(self):
        assert convert_batch([]) == []

    def test_generator_input(self, sandburg_record):
        results = convert_batch(r for r in [sandburg_record, sandburg_record])
        assert results[0] == results[1]
