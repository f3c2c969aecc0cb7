#!/usr/bin/env python3
"""
MARC to Dublin Core conversion example

This example demonstrates how to map MARC records onto Dublin Core
elements with marcdc:
- building a record in memory
- reading records from a MARC-XML or ISO 2709 file
- fetching a record over HTTP

Usage:
    python examples/marc_to_dublin_core.py
    python examples/marc_to_dublin_core.py records.xml
    python examples/marc_to_dublin_core.py https://lccn.loc.gov/92005291/marcxml
"""

import logging
import sys

try:
    import marcdc
    from marcdc import ControlField, Field, Record
    from marcdc.fetch import fetch_record
except ImportError:
    print("Error: marcdc not installed")
    print("Install with: pip install -e .")
    sys.exit(1)


def create_sample_record():
    """Create a sample record for the conversion demonstration."""
    return Record('00000cam a2200000 i 4500', fields=[
        ControlField('001', 'ocm12345678'),
        ControlField('008', '200101t20202020cau           000 0 eng d'),
        Field('020', subfields=[('a', '9781491927285')]),
        Field('100', ('1', ' '), [('a', 'Smith, Jane,'), ('d', '1975-'), ('e', 'author.')]),
        Field('245', ('1', '0'), [('a', 'Systems programming /'), ('c', 'Jane Smith.')]),
        Field('264', (' ', '1'), [('a', 'San Francisco :'), ('b', "O'Reilly Media,"), ('c', '2020.')]),
        Field('520', subfields=[('a', 'An introduction to low-level programming.')]),
        Field('655', (' ', '7'), [('a', 'Handbooks and manuals.'), ('2', 'lcgft')]),
        Field('700', ('1', ' '), [('a', 'Jones, Bob,'), ('e', 'author.')]),
        Field('856', ('4', '0'), [('u', 'https://example.org/systems-programming')]),
    ])


def show(dc):
    """Print each Dublin Core element that has a value."""
    print("=" * 70)
    for name, value in dc.as_dict().items():
        if value is None:
            continue
        if isinstance(value, tuple):
            value = " | ".join(value)
        print(f"{name:<14} {value}")
    print()


def main(argv):
    logging.basicConfig(level=logging.INFO)

    if len(argv) < 2:
        show(marcdc.convert(create_sample_record()))
        return 0

    source = argv[1]
    if source.startswith(("http://", "https://")):
        records = [fetch_record(source)]
    else:
        records = marcdc.read(source)

    for dc in marcdc.convert_batch(records):
        show(dc)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
