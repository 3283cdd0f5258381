import textwrap

from ycfpy import SpanCategory, scan
from ycfpy.outline import build_outline, find_entries


def _outline(source: str):
    return build_outline(scan(source).spans, source)


def test_outline_follows_dotted_keys_and_nested_maps() -> None:
    source = textwrap.dedent(
        """
        server.host = "localhost"
        server = {
            port = 8080
            tls.enabled = true // on by default
        }
        """
    ).lstrip()
    entries = _outline(source)

    assert [entry.dotted for entry in entries] == ["server.host", "server"]
    host, server = entries
    assert host.segments == ("server", "host")
    assert host.value is not None
    assert host.value.category == SpanCategory.STRING

    assert [child.dotted for child in server.children] == ["server.port", "server.tls.enabled"]
    enabled = server.children[1]
    assert enabled.segments == ("tls", "enabled")
    assert enabled.value is not None
    assert enabled.value.text(source) == "true"


def test_outline_collects_keys_of_maps_inside_arrays() -> None:
    source = 'items = [ { name = "a" } [ { name = "b" } ] 3 ]'
    entries = _outline(source)

    assert len(entries) == 1
    assert [child.dotted for child in entries[0].children] == ["items.name", "items.name"]
    assert len(find_entries(entries, "items.name")) == 2
    assert find_entries(entries, ("items",)) == [entries[0]]


def test_outline_keeps_keys_without_values() -> None:
    source = "a b = 1 c ="
    entries = _outline(source)

    assert [(entry.dotted, entry.value is not None) for entry in entries] == [
        ("a", False),
        ("b", True),
        ("c", False),
    ]


def test_find_entries_walks_all_depths() -> None:
    source = "a = { b = { c = 1 } }"
    entries = _outline(source)

    (found,) = find_entries(entries, "a.b.c")
    assert found.value is not None
    assert found.value.text(source) == "1"
    assert find_entries(entries, "a.c") == []
    assert [entry.dotted for entry in entries[0].walk()] == ["a", "a.b", "a.b.c"]
