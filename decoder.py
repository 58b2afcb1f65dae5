from typing import BinaryIO, Iterable

from decode_context import DecodeContext, PendingMember
from exceptions import DecodeError
from osm_data import OsmData, assemble
from osm_element import Bound, Node, Relation, Way
from resolver import resolve_members
from tag_set import EMPTY_TAG_SET, TagSet
from token_stream import TokenStream


def decode(stream: BinaryIO, *, bounds: Iterable[Bound] = ()) -> OsmData:
    """
    Build an `OsmData` graph from a JSON document read incrementally from `stream`.

    Raises `DecodeError` if the document is malformed; nothing is returned then.
    """
    context = DecodeContext(bounds=list(bounds))

    Decoder(TokenStream(stream), context).run()
    resolve_members(context)

    return assemble(context)


def read_int(tokens: TokenStream, name: str) -> int:
    event, value = tokens.next()

    if event == 'number':
        if isinstance(value, int):
            return value

        if value.is_integer():
            return int(value)

    raise DecodeError(f'Expected an integer for "{name}", got {event} {value!r}')


def read_float(tokens: TokenStream, name: str) -> float:
    event, value = tokens.next()

    if event != 'number':
        raise DecodeError(f'Expected a number for "{name}", got {event} {value!r}')

    return float(value)


def read_string(tokens: TokenStream, name: str) -> str:
    event, value = tokens.next()

    if event != 'string':
        raise DecodeError(f'Expected a string for "{name}", got {event} {value!r}')

    return value


def parse_tags(tokens: TokenStream) -> TagSet:
    if tokens.expect('start_map', 'null')[0] == 'null':
        return EMPTY_TAG_SET

    tags = None

    while (token := tokens.expect('map_key', 'end_map'))[0] != 'end_map':
        key = token[1]
        event, value = tokens.next()

        if event in ('start_map', 'start_array'):
            tokens.skip(event)
            continue

        if event == 'null':
            continue

        if tags is None:
            tags = {}

        # values are strings upstream, but tolerate bare numbers and booleans
        if event == 'boolean':
            value = 'yes' if value else 'no'

        tags[key] = value if isinstance(value, str) else str(value)

    if tags is None:
        return EMPTY_TAG_SET

    return TagSet(tags)


class Decoder:
    def __init__(self, tokens: TokenStream, context: DecodeContext):
        self.tokens = tokens
        self.context = context

    def run(self) -> None:
        for event, _ in self.tokens:
            if event != 'start_map':
                continue

            event, key = self.tokens.next()

            # empty object
            if event == 'end_map':
                continue

            # not an entity, look inside it for nested entities
            if key != 'type':
                continue

            event, value = self.tokens.next()

            if event == 'string' and value == 'node':
                self.parse_node()
            elif event == 'string' and value == 'way':
                self.parse_way()
            elif event == 'string' and value == 'relation':
                self.parse_relation()
            else:
                self.tokens.skip(event)
                self.tokens.skip('start_map')

    def fields(self) -> Iterable[str]:
        while (token := self.tokens.expect('map_key', 'end_map'))[0] != 'end_map':
            yield token[1]

    def parse_node(self) -> Node:
        element_id = 0
        lat = lon = 0.0
        tags = EMPTY_TAG_SET

        for name in self.fields():
            if name == 'id':
                element_id = read_int(self.tokens, name)
            elif name == 'lat':
                lat = read_float(self.tokens, name)
            elif name == 'lon':
                lon = read_float(self.tokens, name)
            elif name == 'tags':
                tags = parse_tags(self.tokens)
            else:
                self.tokens.skip_value()

        node = Node(id=element_id, lat=lat, lon=lon, tags=tags)
        self.context.add_node(node)
        return node

    def parse_way(self) -> Way:
        element_id = 0
        tags = EMPTY_TAG_SET
        nodes = []

        for name in self.fields():
            if name == 'id':
                element_id = read_int(self.tokens, name)
            elif name == 'nodes':
                nodes.extend(self.parse_way_nodes())
            elif name == 'tags':
                tags = parse_tags(self.tokens)
            else:
                self.tokens.skip_value()

        way = Way(id=element_id, tags=tags, nodes=tuple(nodes))
        self.context.add_way(way)
        return way

    def parse_way_nodes(self) -> Iterable[Node]:
        nodes_by_id = self.context.nodes_by_id
        self.tokens.expect('start_array')

        while (token := self.tokens.expect('number', 'end_array'))[0] != 'end_array':
            value = token[1]

            if not isinstance(value, int):
                raise DecodeError(f'Expected an integer way node id, got {value!r}')

            # nodes must precede the ways that use them, unknown ids are dropped
            if (node := nodes_by_id.get(value)) is not None:
                yield node

    def parse_relation(self) -> Relation:
        element_id = 0
        tags = EMPTY_TAG_SET
        members = []

        for name in self.fields():
            if name == 'id':
                element_id = read_int(self.tokens, name)
            elif name == 'members':
                members.extend(self.parse_members())
            elif name == 'tags':
                tags = parse_tags(self.tokens)
            else:
                self.tokens.skip_value()

        relation = Relation(id=element_id, tags=tags, declared_members=len(members))
        self.context.add_relation(relation, members)
        return relation

    def parse_members(self) -> Iterable[PendingMember]:
        self.tokens.expect('start_array')

        while self.tokens.expect('start_map', 'end_array')[0] != 'end_array':
            member_type = ''
            ref = 0
            role = ''

            for name in self.fields():
                if name == 'type':
                    member_type = read_string(self.tokens, name)
                elif name == 'ref':
                    ref = read_int(self.tokens, name)
                elif name == 'role':
                    role = read_string(self.tokens, name)
                else:
                    self.tokens.skip_value()

            yield PendingMember(type=member_type, ref=ref, role=role)
