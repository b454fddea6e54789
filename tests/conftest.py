"""Shared pytest fixtures for tiler tests."""

import random

import pytest

from tiler.core.catalog import Catalog, build_catalog
from tiler.core.tile_sets import TileSet, register_tile_set, unregister_tile_set
from tiler.core.tiles import TileSpec


class OrderedRandom(random.Random):
    """Random source that keeps candidate order and always picks the first choice."""

    def shuffle(self, x):
        pass

    def choice(self, seq):
        return seq[0]


def chain_specs(order=("s", "t1", "t2")):
    """
    Three tiles that only constrain their left/right centers.

    s:  left a, right a
    t1: left a, right b
    t2: left b, right c   (nothing accepts c, so t2 is a dead end)
    """
    specs = {
        "s": TileSpec("s", "GGGaGGGa"),
        "t1": TileSpec("t1", "GGGbGGGa"),
        "t2": TileSpec("t2", "GGGcGGGb"),
    }
    return tuple(specs[name] for name in order)


@pytest.fixture
def ordered_rng():
    """Deterministic rng: no shuffling, first relaxation choice."""
    return OrderedRandom(0)


@pytest.fixture
def plain_tile_set():
    """A single all-green tile that fits next to itself on every side."""
    return TileSet("plain", 3, (TileSpec("substrate", "GGGGGGGG"),))


@pytest.fixture
def plain_catalog(plain_tile_set):
    return build_catalog(plain_tile_set)


@pytest.fixture
def chain_tile_set():
    """Chain tiles s, t1, t2 without derived variants."""
    return TileSet("chain", 3, chain_specs(), derive=False)


@pytest.fixture
def chain_catalog(chain_tile_set):
    return build_catalog(chain_tile_set)


@pytest.fixture
def isolated_catalog():
    """Two tiles whose sides match neither each other nor themselves."""
    tile_set = TileSet(
        "isolated",
        3,
        (TileSpec("first", "ABCDEFGH"), TileSpec("second", "IJKLMNOP")),
        derive=False,
    )
    return build_catalog(tile_set)


@pytest.fixture
def chain_catalog_factory():
    """Build a chain catalog with the tiles in a given order."""

    def factory(*order):
        return build_catalog(TileSet("chain", 3, chain_specs(order), derive=False))

    return factory


@pytest.fixture
def knots_catalog():
    return Catalog.build("knots")


@pytest.fixture
def registered_chain(chain_tile_set):
    """Register the chain tile set by name for the duration of a test."""
    register_tile_set(chain_tile_set, replace=True)
    yield chain_tile_set
    unregister_tile_set(chain_tile_set.name)
