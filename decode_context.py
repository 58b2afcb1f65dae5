from dataclasses import dataclass, field

from aliases import ElementId, Role
from osm_element import Bound, Member, Node, Relation, Way


@dataclass(frozen=True, kw_only=True, slots=True)
class PendingMember:
    type: str
    ref: ElementId
    role: Role


@dataclass(kw_only=True, slots=True)
class DecodeContext:
    """
    Scratch state of a single decode invocation.

    It is created by `decoder.decode`, filled by the decoder, read by the
    resolver and emptied by the assembler; it must not be shared between
    invocations or threads.
    """

    bounds: list[Bound] = field(default_factory=list)

    nodes: list[Node] = field(default_factory=list)
    ways: list[Way] = field(default_factory=list)
    relations: list[Relation] = field(default_factory=list)

    nodes_by_id: dict[ElementId, Node] = field(default_factory=dict)
    ways_by_id: dict[ElementId, Way] = field(default_factory=dict)
    relations_by_id: dict[ElementId, Relation] = field(default_factory=dict)

    pending_members: dict[Relation, list[PendingMember]] = field(default_factory=dict)
    resolved_members: dict[Relation, list[Member]] = field(default_factory=dict)

    def add_node(self, node: Node) -> None:
        self.nodes.append(node)
        self.nodes_by_id[node.id] = node

    def add_way(self, way: Way) -> None:
        self.ways.append(way)
        self.ways_by_id[way.id] = way

    def add_relation(self, relation: Relation, members: list[PendingMember]) -> None:
        self.relations.append(relation)
        self.relations_by_id[relation.id] = relation

        if members:
            self.pending_members[relation] = members

    def release(self) -> None:
        self.nodes_by_id = {}
        self.ways_by_id = {}
        self.relations_by_id = {}
        self.pending_members = {}
        self.resolved_members = {}
