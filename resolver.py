from decode_context import DecodeContext
from osm_element import Member


def resolve_members(context: DecodeContext) -> None:
    """
    Resolve the pending members of every relation, in declaration order.

    Each member is looked up in the identity map selected by its declared
    type. Unresolved references and unknown types are dropped. Resolved
    members are collected in `context.resolved_members` until assembly.
    """
    maps = {
        'node': context.nodes_by_id,
        'way': context.ways_by_id,
        'relation': context.relations_by_id,
    }

    for relation, pending in context.pending_members.items():
        members = context.resolved_members.setdefault(relation, [])

        for p in pending:
            elements_by_id = maps.get(p.type)

            if elements_by_id is None or (element := elements_by_id.get(p.ref)) is None:
                continue

            members.append(Member(role=p.role, type=p.type, element=element))
