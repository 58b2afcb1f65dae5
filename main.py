import time

from geopy import Point

from config import OVERPASS_API_INTERPRETER, SEARCH_BBOX
from exceptions import OverpassError
from overpass import Overpass
from utils import plural


def main():
    time_start = time.perf_counter()

    e = SEARCH_BBOX
    a = Point(e['min_lat'], e['min_lon'])
    b = Point(e['max_lat'], e['max_lon'])

    overpass = Overpass()
    print(f'🌍 Querying {OVERPASS_API_INTERPRETER}')
    print(f'Bounding box: {a.latitude},{a.longitude} - {b.latitude},{b.longitude}')

    try:
        data = overpass.get_data(a, b)
    except OverpassError as ex:
        print(f'❌ {ex}')
        raise SystemExit(1)

    print(f'📦 {data.summary()}')

    if dropped := data.dropped_members:
        print(f'🔗 Dropped {plural(dropped, "relation member")} outside the extract')

    print(f'🏁 Finished in {time.perf_counter() - time_start:.1F} sec')
    print()


if __name__ == '__main__':
    main()
