"""Tests for the immutable tag mapping."""
import pytest

from tag_set import EMPTY_TAG_SET, TagSet


class TestTagSet:
    """Read-only, content-compared tag mapping."""

    def test_mapping_access(self):
        tags = TagSet({'highway': 'residential', 'name': 'Main Street'})

        assert tags['highway'] == 'residential'
        assert tags.get('surface') is None
        assert 'name' in tags
        assert len(tags) == 2
        assert sorted(tags) == ['highway', 'name']

    def test_equal_content_is_interchangeable(self):
        a = TagSet({'a': '1', 'b': '2'})
        b = TagSet({'b': '2', 'a': '1'})

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1
        assert a == {'a': '1', 'b': '2'}

    def test_is_immutable(self):
        tags = TagSet({'a': '1'})

        with pytest.raises(TypeError):
            tags['a'] = '2'  # type: ignore[index]

    def test_source_mapping_is_copied(self):
        source = {'a': '1'}
        tags = TagSet(source)
        source['a'] = '2'

        assert tags['a'] == '1'

    def test_of_returns_shared_empty_instance(self):
        assert TagSet.of({}) is EMPTY_TAG_SET
        assert TagSet.of(None) is EMPTY_TAG_SET
        assert len(EMPTY_TAG_SET) == 0

    def test_to_dict_returns_copy(self):
        tags = TagSet({'a': '1'})
        d = tags.to_dict()
        d['a'] = '2'

        assert tags['a'] == '1'
