from dataclasses import dataclass

from geopy import Point

from aliases import ElementId, ElementType, Role
from tag_set import EMPTY_TAG_SET, TagSet


@dataclass(frozen=True, kw_only=True, slots=True)
class Node:
    id: ElementId
    lat: float = 0.0
    lon: float = 0.0
    tags: TagSet = EMPTY_TAG_SET


@dataclass(frozen=True, kw_only=True, slots=True)
class Way:
    id: ElementId
    tags: TagSet = EMPTY_TAG_SET
    nodes: tuple[Node, ...] = ()

    @property
    def is_closed(self) -> bool:
        return len(self.nodes) > 2 and self.nodes[0] is self.nodes[-1]


# relations may reference each other in cycles, so equality and hashing
# are by identity and repr does not descend into members; members are
# set once by `osm_data.assemble`
@dataclass(frozen=True, kw_only=True, slots=True, eq=False, repr=False)
class Relation:
    id: ElementId
    tags: TagSet = EMPTY_TAG_SET
    declared_members: int = 0
    members: tuple['Member', ...] = ()

    def __repr__(self) -> str:
        return f'Relation(id={self.id}, tags={self.tags!r}, members={len(self.members)}/{self.declared_members})'


@dataclass(frozen=True, kw_only=True, slots=True)
class Member:
    role: Role
    type: ElementType
    element: Node | Way | Relation

    def __post_init__(self):
        expected = _ELEMENT_CLASSES[self.type]
        assert isinstance(self.element, expected), f'{self.type} member must reference a {expected.__name__}'

    @property
    def ref(self) -> ElementId:
        return self.element.id


_ELEMENT_CLASSES: dict[ElementType, type] = {
    'node': Node,
    'way': Way,
    'relation': Relation,
}


@dataclass(frozen=True, kw_only=True, slots=True)
class Bound:
    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    @classmethod
    def from_corners(cls, a: Point, b: Point) -> 'Bound':
        return cls(
            min_lat=min(a.latitude, b.latitude),
            min_lon=min(a.longitude, b.longitude),
            max_lat=max(a.latitude, b.latitude),
            max_lon=max(a.longitude, b.longitude),
        )

    @property
    def south_west(self) -> Point:
        return Point(self.min_lat, self.min_lon)

    @property
    def north_east(self) -> Point:
        return Point(self.max_lat, self.max_lon)

    def contains(self, lat: float, lon: float) -> bool:
        return self.min_lat <= lat <= self.max_lat and self.min_lon <= lon <= self.max_lon

    def to_overpass(self) -> str:
        return f'({self.min_lat},{self.min_lon},{self.max_lat},{self.max_lon})'
