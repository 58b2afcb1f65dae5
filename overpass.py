import gzip
from os import PathLike

import requests
import urllib3
from geopy import Point
from requests import Response
from tenacity import (retry, retry_if_exception_type, stop_after_attempt,
                      wait_exponential)

from config import (CONNECT_TIMEOUT, DEFAULT_QUERY, OVERPASS_API_INTERPRETER,
                    READ_TIMEOUT, TRANSPORT_RETRIES)
from decoder import decode
from exceptions import DecodeError, TransportError
from osm_data import OsmData
from osm_element import Bound
from overpass_query import build_query, build_url
from utils import get_http_client

RESPONSECODE_OK = 200


def describe_failure(r: Response, url: str) -> str:
    if api_error := r.headers.get('Error'):
        return f'Received API HTTP response code {r.status_code} with message "{api_error}" for URL "{url}".'

    return f'Received API HTTP response code {r.status_code} for URL "{url}".'


class Overpass:
    def __init__(self, *, base_url: str = OVERPASS_API_INTERPRETER, query: str = DEFAULT_QUERY):
        self.base_url = base_url
        self.query = query
        self.c = get_http_client()

    def get_url(self, a: Point, b: Point) -> str:
        return build_url(self.base_url, build_query(self.query, a, b))

    # only failures to reach the server are retried
    @retry(stop=stop_after_attempt(TRANSPORT_RETRIES),
           wait=wait_exponential(),
           retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
           reraise=True)
    def _connect(self, url: str) -> Response:
        return self.c.get(url, stream=True, timeout=(CONNECT_TIMEOUT, READ_TIMEOUT))

    def open(self, url: str) -> Response:
        try:
            r = self._connect(url)
        except requests.RequestException as e:
            raise TransportError(f'Failed to connect to "{url}": {e}', url=url) from e

        if r.status_code != RESPONSECODE_OK:
            r.close()
            raise TransportError(describe_failure(r, url), url=url, status_code=r.status_code)

        # let urllib3 undo gzip and deflate content encoding
        r.raw.decode_content = True
        return r

    def get_data(self, a: Point, b: Point) -> OsmData:
        url = self.get_url(a, b)
        bound = Bound.from_corners(a, b)

        with self.open(url) as r:
            try:
                return decode(r.raw, bounds=(bound,))
            except (requests.RequestException, urllib3.exceptions.HTTPError, OSError) as e:
                raise DecodeError(f'Failed to read response for URL "{url}": {e}') from e


def decode_file(path: str | PathLike, *, bounds: tuple[Bound, ...] = ()) -> OsmData:
    opener = gzip.open if str(path).endswith('.gz') else open

    with opener(path, 'rb') as f:
        try:
            return decode(f, bounds=bounds)
        except (EOFError, OSError) as e:
            raise DecodeError(f'Failed to read "{path}": {e}') from e
