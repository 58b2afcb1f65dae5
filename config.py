import os

# Dedicated instance unavailable? Pick one from the public list:
# https://wiki.openstreetmap.org/wiki/Overpass_API#Public_Overpass_API_instances
OVERPASS_API_INTERPRETER = os.getenv('OVERPASS_API_INTERPRETER', 'https://overpass-api.de/api/interpreter')

USER_AGENT = os.getenv('USER_AGENT', 'overpass-graph (+https://wiki.openstreetmap.org/wiki/Overpass_API)')

CONNECT_TIMEOUT = float(os.getenv('CONNECT_TIMEOUT', '15'))  # seconds
READ_TIMEOUT = float(os.getenv('READ_TIMEOUT', '180'))  # seconds
TRANSPORT_RETRIES = int(os.getenv('TRANSPORT_RETRIES', '3'))

# {{bbox}} is replaced with (south,west,north,east)
DEFAULT_QUERY = os.getenv(
    'OVERPASS_QUERY',
    '(node{{bbox}};way{{bbox}};relation{{bbox}};);(._;>;);out body;')

SEARCH_BBOX = {
    'min_lat': float(os.getenv('SEARCH_MIN_LAT', '53.0745')),
    'min_lon': float(os.getenv('SEARCH_MIN_LON', '8.8035')),
    'max_lat': float(os.getenv('SEARCH_MAX_LAT', '53.0795')),
    'max_lon': float(os.getenv('SEARCH_MAX_LON', '8.8135')),
}
