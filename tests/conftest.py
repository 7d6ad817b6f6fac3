"""Shared fixtures and strategies for the replacement tests."""

import pytest
from hypothesis import strategies as st

from replacement.core.loader import DefaultsLoader
from replacement.logic.matching import is_container, values_match

# Never produced by st_json, so it can mark rewritten positions unambiguously
REPLACED = "<replaced>"

st_primitive = (
    st.none()
    | st.booleans()
    | st.integers(min_value=-3, max_value=3)
    | st.sampled_from([0.0, 1.5, -2.0])
    | st.sampled_from(["dog", "cat", "bird", ""])
)

st_key = st.sampled_from(["a", "b", "c", "pet", "animal", "status"])

st_json = st.recursive(
    st_primitive,
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st_key, children, max_size=4),
    max_leaves=25,
)

st_json_container = st.lists(st_json, max_size=5) | st.dictionaries(
    st_key, st_json, max_size=5
)

st_target = st.sampled_from(["dog", "cat", 1, 0, True, False, None, 1.5])

st_limit = st.integers(min_value=1, max_value=8)


def match_paths(value, target, path=()):
    """Paths of every occurrence of ``target`` below the root, in document order."""
    if is_container(value):
        items = enumerate(value) if isinstance(value, list) else value.items()
        for key, child in items:
            if values_match(child, target):
                yield path + (key,)
            elif is_container(child):
                yield from match_paths(child, target, path + (key,))


def get_path(value, path):
    for key in path:
        value = value[key]
    return value


@pytest.fixture
def fresh_defaults():
    """Ensures each test sees a freshly loaded defaults file."""
    DefaultsLoader.reset()
    yield
    DefaultsLoader.reset()
