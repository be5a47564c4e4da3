import textwrap

import pytest
from jsonschema import ValidationError

from treelette import Composite, DecoratingComposite, PrintLeaf, Collection, TreeDefinitionError, record
from treelette.yaml_loader import build_collection, build_view, load_collection, load_view


def _write(tmp_path, text, name="tree.yml"):
    f = tmp_path / name
    f.write_text(textwrap.dedent(text))
    return f


def test_load_view(tmp_path):
    f = _write(
        tmp_path,
        """
        nodes:
          world: world
        root:
          name: nestedView
          decorate: {before: "<<", after: ">>"}
          children:
            - children: [hello, {ref: world}]
            - children: [{ref: world}, {text: js, id: js}]
        """,
    )
    root = load_view(f)
    assert isinstance(root, DecoratingComposite)
    assert root.name == "nestedView"

    with record() as lines:
        root.perform()
    assert lines == ["<<", "hello", "world", "world", "js", ">>"]


def test_refs_share_one_object():
    root = build_view(
        {
            "nodes": {"w": {"text": "world"}},
            "root": {"children": [{"ref": "w"}, {"children": [{"ref": "w"}]}]},
        }
    )
    first, inner = root.children
    assert isinstance(inner, Composite)
    assert first is inner.children[0]


def test_default_markers():
    root = build_view({"root": {"decorate": None, "children": ["x"]}})
    assert (root.before, root.after) == ("NestedStart", "NestedEnd")


def test_bare_string_root_is_leaf():
    root = build_view({"root": "solo"})
    assert isinstance(root, PrintLeaf)
    assert root.text == "solo"


def test_unknown_ref():
    with pytest.raises(TreeDefinitionError):
        build_view({"root": {"children": [{"ref": "missing"}]}})


def test_self_referencing_definition():
    with pytest.raises(TreeDefinitionError):
        build_view({"nodes": {"loop": {"children": [{"ref": "loop"}]}}, "root": {"ref": "loop"}})


def test_view_schema_violation():
    with pytest.raises(ValidationError):
        build_view({"root": {"children": [123]}})
    with pytest.raises(ValidationError):
        build_view({"root": {"text": "x", "children": []}})


def test_load_collection(tmp_path):
    f = _write(
        tmp_path,
        """
        root:
          name: Purchase
          items:
            - name: Electronics
              items:
                - {name: Laptop, price: 1500}
                - {name: Mouse, price: 25}
                - {name: Keyboard, price: 100}
                - {name: HDMI cable, price: 10}
            - name: Textile
              items:
                - {name: Bag, price: 50}
                - {name: Mouse pad, price: 5}
        """,
    )
    purchase = load_collection(f)
    assert isinstance(purchase, Collection)
    assert purchase.price == 1690


def test_collection_ref_counted_once():
    root = build_collection(
        {
            "nodes": {"mouse": {"name": "Mouse", "price": 25}},
            "root": {"name": "Desk", "items": [{"ref": "mouse"}, {"ref": "mouse"}]},
        }
    )
    assert len(root) == 1
    assert root.price == 25


def test_priced_schema_violation():
    with pytest.raises(ValidationError):
        build_collection({"root": {"name": "Bag", "price": "cheap"}})


def test_top_level_must_be_mapping(tmp_path):
    f = _write(tmp_path, "- just\n- a list\n")
    with pytest.raises(TreeDefinitionError):
        load_view(f)


def test_view_alias_chain():
    root = build_view(
        {
            "nodes": {"a": {"ref": "b"}, "b": {"ref": "c"}, "c": "x"},
            "root": {"children": [{"ref": "a"}, {"ref": "c"}]},
        }
    )
    first, second = root.children
    assert isinstance(first, PrintLeaf) and first.text == "x"
    assert first is second


def test_collection_alias_chain():
    root = build_collection(
        {
            "nodes": {"cheap": {"ref": "bag"}, "bag": {"name": "Bag", "price": 50}},
            "root": {"name": "Textile", "items": [{"ref": "cheap"}, {"ref": "bag"}]},
        }
    )
    assert len(root) == 1
    assert root.price == 50


def test_alias_loop():
    with pytest.raises(TreeDefinitionError):
        build_view({"nodes": {"a": {"ref": "b"}, "b": {"ref": "a"}}, "root": {"ref": "a"}})
    with pytest.raises(TreeDefinitionError):
        build_collection({"nodes": {"a": {"ref": "b"}, "b": {"ref": "a"}}, "root": {"ref": "a"}})
