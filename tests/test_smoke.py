"""Smoke tests to verify package structure and imports work."""


def test_import_traversal():
    """Test that traversal primitives can be imported."""
    from underbar import each, every, reduce, some

    assert each is not None
    assert reduce is not None
    assert every is not None
    assert some is not None


def test_import_decorators():
    """Test that decorators can be imported."""
    from underbar import delay, memoize, memoize_async, once, once_async, throttle

    assert once is not None
    assert once_async is not None
    assert memoize is not None
    assert memoize_async is not None
    assert delay is not None
    assert throttle is not None


def test_import_collection():
    """Test that collection operations can be imported."""
    from underbar import filter, map, pluck, sort_by, zip

    assert map is not None
    assert filter is not None
    assert pluck is not None
    assert sort_by is not None
    assert zip is not None


def test_flat_and_submodule_imports_agree():
    """Flat re-exports are the submodule objects."""
    import underbar
    from underbar.collection import map as collection_map
    from underbar.decorators import throttle
    from underbar.traversal import reduce

    assert underbar.map is collection_map
    assert underbar.throttle is throttle
    assert underbar.reduce is reduce


def test_all_exports_exist():
    """Every name in __all__ is importable."""
    import underbar

    for name in underbar.__all__:
        assert hasattr(underbar, name), name
