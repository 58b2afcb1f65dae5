"""Pytest fixtures for overpass-graph tests."""
import io
import json

import pytest


def as_stream(document) -> io.BytesIO:
    """Encode a JSON-able value (or raw JSON text) as a UTF-8 byte stream."""
    if not isinstance(document, str):
        document = json.dumps(document)

    return io.BytesIO(document.encode('utf-8'))


@pytest.fixture
def stream():
    return as_stream


@pytest.fixture
def overpass_document():
    """A document shaped like a real Overpass API response."""
    return {
        'version': 0.6,
        'generator': 'Overpass API 0.7.62',
        'osm3s': {
            'timestamp_osm_base': '2024-01-01T00:00:00Z',
            'copyright': 'The data included in this document is from www.openstreetmap.org.',
        },
        'elements': [
            {'type': 'node', 'id': 1, 'lat': 53.07, 'lon': 8.80, 'tags': {'amenity': 'cafe', 'name': 'Kaffee'}},
            {'type': 'node', 'id': 2, 'lat': 53.071, 'lon': 8.801},
            {'type': 'node', 'id': 3, 'lat': 53.072, 'lon': 8.802},
            {'type': 'way', 'id': 10, 'nodes': [1, 2, 3, 1], 'tags': {'building': 'yes'}},
            {'type': 'way', 'id': 11, 'nodes': [2, 3]},
            {'type': 'relation', 'id': 100,
             'members': [
                 {'type': 'way', 'ref': 10, 'role': 'outer'},
                 {'type': 'relation', 'ref': 101, 'role': 'subarea'},
             ],
             'tags': {'type': 'multipolygon'}},
            {'type': 'relation', 'id': 101,
             'members': [
                 {'type': 'node', 'ref': 1, 'role': 'label'},
                 {'type': 'relation', 'ref': 100, 'role': 'parent'},
             ]},
        ],
    }
