from urllib.parse import quote_plus

from geopy import Point

from osm_element import Bound

BBOX_PLACEHOLDER = '{{bbox}}'


def build_query(template: str, a: Point, b: Point) -> str:
    return template.replace(BBOX_PLACEHOLDER, Bound.from_corners(a, b).to_overpass())


def build_url(base_url: str, query: str) -> str:
    if not query.lstrip().startswith('[out:'):
        query = '[out:json];' + query

    return f'{base_url}?data={quote_plus(query)}'
