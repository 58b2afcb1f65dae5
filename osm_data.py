from dataclasses import dataclass

from decode_context import DecodeContext
from osm_element import Bound, Node, Relation, Way


@dataclass(frozen=True, kw_only=True, slots=True)
class OsmData:
    bounds: tuple[Bound, ...]
    nodes: tuple[Node, ...]
    ways: tuple[Way, ...]
    relations: tuple[Relation, ...]

    @property
    def dropped_members(self) -> int:
        return sum(r.declared_members - len(r.members) for r in self.relations)

    def summary(self) -> str:
        return f'nodes: {len(self.nodes)} ways: {len(self.ways)} relations: {len(self.relations)}'


def assemble(context: DecodeContext) -> OsmData:
    # relations are frozen, members are attached exactly once here
    for relation, members in context.resolved_members.items():
        object.__setattr__(relation, 'members', tuple(members))

    data = OsmData(
        bounds=tuple(context.bounds),
        nodes=tuple(context.nodes),
        ways=tuple(context.ways),
        relations=tuple(context.relations),
    )

    # identity maps are of no use past this point and may be large
    context.release()
    return data
