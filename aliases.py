from typing import Literal, TypeAlias

# could also use NewType(name, type)

ElementType: TypeAlias = Literal['node', 'way', 'relation']
ElementId: TypeAlias = int
Role: TypeAlias = str
