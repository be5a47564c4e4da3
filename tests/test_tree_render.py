from io import StringIO

from rich.console import Console

from treelette import PrintLeaf, Composite, DecoratingComposite, Product, Collection
from treelette.demo import build_purchase, build_views
from treelette.utils.tree import build_rich_tree, iter_nodes, total_line


def _render(tree) -> str:
    buf = StringIO()
    Console(file=buf, width=80).print(tree)
    return buf.getvalue()


def test_iter_nodes_depth_first():
    a, b, c = PrintLeaf("a"), PrintLeaf("b"), PrintLeaf("c")
    inner = Composite(a, b, name="inner")
    root = DecoratingComposite(inner, c, name="root")

    walked = [(depth, obj) for depth, obj in iter_nodes(root)]
    assert walked == [(0, root), (1, inner), (2, a), (2, b), (1, c)]


def test_iter_nodes_on_leaf():
    leaf = PrintLeaf("solo")
    assert list(iter_nodes(leaf)) == [(0, leaf)]


def test_iter_nodes_priced():
    bag = Product("Bag", 50)
    textile = Collection("Textile", bag)
    assert list(iter_nodes(textile)) == [(0, textile), (1, bag)]


def test_view_tree_render():
    out = _render(build_rich_tree(build_views()["nested"]))
    assert "nestedView" in out
    assert "helloView" in out and "jsView" in out
    assert "NestedStart" in out
    assert out.count("world") == 2


def test_priced_tree_render():
    out = _render(build_rich_tree(build_purchase()))
    assert "Purchase: 1690" in out
    assert "Electronics: 1635" in out
    assert "HDMI cable: 10" in out


def test_priced_tree_render_without_prices():
    out = _render(build_rich_tree(build_purchase(), show_prices=False))
    assert "Laptop" in out
    assert "1500" not in out


def test_total_line():
    assert total_line(1690) == "Total is 1690"
    assert total_line(2.5, template="Sum: {{ total }} EUR") == "Sum: 2.5 EUR"
