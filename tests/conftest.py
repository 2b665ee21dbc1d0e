from __future__ import annotations

import pytest

from methodutils import ClassRegistry


def _recorder(name):
    def mth(self, log, *args, **kwargs):
        log.append(name)
    mth.__name__ = "mth_" + name
    return mth


def _define(registry, name, bases=(), recording=True):
    methods = {"mth": _recorder(name)} if recording else None
    registry.define(name, bases, methods)


@pytest.fixture
def diamond_registry() -> ClassRegistry:
    """
    Base1  Base2  Base3
       \\   /  \\   /
       Main1   Main2
           \\   /
          TopLevel

    plus Sparse(Main1, SparseSub), SparseSub(Base2), neither defining mth.
    """
    registry = ClassRegistry()
    _define(registry, "Base1")
    _define(registry, "Base2")
    _define(registry, "Base3")
    _define(registry, "Main1", ["Base1", "Base2"])
    _define(registry, "Main2", ["Base2", "Base3"])
    _define(registry, "TopLevel", ["Main1", "Main2"])
    _define(registry, "SparseSub", ["Base2"], recording=False)
    _define(registry, "Sparse", ["Main1", "SparseSub"], recording=False)
    return registry


@pytest.fixture
def shortcut_registry() -> ClassRegistry:
    # Derived names Root directly and again through Middle -> Leaf.
    # Python's C3 refuses this shape, a registry does not.
    registry = ClassRegistry()
    _define(registry, "Root")
    _define(registry, "Leaf", ["Root"])
    _define(registry, "Middle", ["Leaf"])
    _define(registry, "Derived", ["Root", "Middle"])
    return registry


@pytest.fixture
def cyclic_registry() -> ClassRegistry:
    registry = ClassRegistry()
    _define(registry, "Start", ["Loop1"])
    _define(registry, "Loop1", ["Loop2"])
    _define(registry, "Loop2", ["Loop1"])
    return registry
