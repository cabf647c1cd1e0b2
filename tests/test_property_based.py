"""Property-based tests for map_to_dto()."""

from hypothesis import given
from hypothesis import strategies as st

from dtomap import map_to_dto, resolve

field_names = st.text(
    alphabet=st.characters(whitelist_categories=("Ll", "Lu")),
    min_size=1,
    max_size=8,
).filter(lambda name: name not in ("path", "transform"))

path_strings = st.lists(field_names, min_size=1, max_size=3).map(".".join)

json_scalars = st.one_of(
    st.none(), st.booleans(), st.integers(), st.text(max_size=10)
)

json_data = st.recursive(
    json_scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=3),
        st.dictionaries(field_names, children, max_size=4),
    ),
    max_leaves=10,
)

specs = st.recursive(
    st.dictionaries(field_names, path_strings, max_size=4),
    lambda children: st.dictionaries(
        field_names, st.one_of(path_strings, children), min_size=1, max_size=4
    ),
    max_leaves=12,
)


def _same_shape(output, spec) -> bool:
    if list(output) != list(spec):
        return False
    for key, rule in spec.items():
        if isinstance(rule, dict) and not _same_shape(output[key], rule):
            return False
    return True


@given(source=json_data, spec=specs)
def test_output_mirrors_spec_shape(source, spec):
    """Output keys and nesting match the spec exactly."""
    assert _same_shape(map_to_dto(source, spec), spec)


@given(source=json_data, spec=specs)
def test_idempotent(source, spec):
    """Mapping twice with the same inputs gives equal outputs."""
    assert map_to_dto(source, spec) == map_to_dto(source, spec)


@given(data=st.dictionaries(field_names, json_scalars, min_size=1, max_size=5))
def test_top_level_keys_resolve_to_values(data):
    """Every present key resolves to its value, None included."""
    for key, value in data.items():
        assert resolve(data, key, default=object()) == value


@given(data=st.dictionaries(field_names, st.integers(), max_size=5), key=field_names)
def test_absent_keys_use_default(data, key):
    """Absent keys always produce the default."""
    marker = object()
    if key not in data:
        assert resolve(data, key, marker) is marker
