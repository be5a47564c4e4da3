import pytest

from treelette.utils.templates import render


def test_render():
    assert render("Hello {{ name }}", {"name": "Alice"}) == "Hello Alice"


def test_render_missing_variable():
    with pytest.raises(RuntimeError) as exc:
        render("Total is {{ total }}", {})
    assert "Data keys" in str(exc.value)
