from collections.abc import Iterator, Mapping


class TagSet(Mapping[str, str]):
    __slots__ = ('_tags', '_hash')

    def __init__(self, tags: Mapping[str, str] | None = None):
        self._tags: dict[str, str] = dict(tags) if tags else {}
        self._hash: int | None = None

    @classmethod
    def of(cls, tags: Mapping[str, str] | None) -> 'TagSet':
        if not tags:
            return EMPTY_TAG_SET

        if isinstance(tags, TagSet):
            return tags

        return cls(tags)

    def __getitem__(self, key: str) -> str:
        return self._tags[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, key: object) -> bool:
        return key in self._tags

    def __eq__(self, other):
        if isinstance(other, TagSet):
            return self._tags == other._tags

        if isinstance(other, Mapping):
            return self._tags == dict(other)

        return NotImplemented

    def __hash__(self):
        if self._hash is None:
            self._hash = hash(frozenset(self._tags.items()))

        return self._hash

    def __repr__(self) -> str:
        return f'TagSet({self._tags!r})'

    def to_dict(self) -> dict[str, str]:
        return dict(self._tags)


EMPTY_TAG_SET = TagSet()
