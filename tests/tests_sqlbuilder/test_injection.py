"""
==============================================
Pytest suite for sqlbuilder/injection.py
==============================================

How to Execute:
---------------
All tests:          pytest tests/tests_sqlbuilder/test_injection.py -v
"""

import pytest

from sqlbuilder.injection import CreateTableMarker, Injection


@pytest.mark.unit
def test_render_empty_marker():
    assert Injection().render(CreateTableMarker.INIT) == ""


@pytest.mark.unit
def test_render_joins_entries_in_insertion_order():
    injection = Injection()
    injection.sql(CreateTableMarker.AFTER_CREATE, "first")
    injection.sql(CreateTableMarker.AFTER_CREATE, "second")

    assert injection.render(CreateTableMarker.AFTER_CREATE) == " first second"


@pytest.mark.unit
def test_markers_are_independent():
    injection = Injection()
    injection.sql(CreateTableMarker.AFTER_OPTION, "late")
    injection.sql(CreateTableMarker.INIT, "early")

    assert injection.render(CreateTableMarker.INIT) == " early"
    assert injection.render(CreateTableMarker.AFTER_DEFINE) == ""
    assert injection.render(CreateTableMarker.AFTER_OPTION) == " late"


@pytest.mark.edge_case
def test_render_does_not_consume_entries():
    injection = Injection()
    injection.sql(CreateTableMarker.INIT, "/* hint */")

    assert injection.render(CreateTableMarker.INIT) == injection.render(CreateTableMarker.INIT)


@pytest.mark.unit
def test_marker_grammar_order():
    assert list(CreateTableMarker) == sorted(CreateTableMarker) == [
        CreateTableMarker.INIT,
        CreateTableMarker.AFTER_CREATE,
        CreateTableMarker.AFTER_DEFINE,
        CreateTableMarker.AFTER_OPTION,
    ]
