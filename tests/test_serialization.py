# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import pytest
from .common import *
from gridsync.serialization import GridSyncEncoder, GridSyncDecoder, save_gridsync_object, load_gridsync_object
from gridsync.topologies import round_topology

def test_layout_roundtrip():
    json = GridSyncEncoder().encode(GridLayout(3, 2))
    layout = GridSyncDecoder().decode(json)
    assert isinstance(layout, GridLayout)
    assert layout == GridLayout(3, 2)
    assert layout.members(GridGroup(1, 2)) == {2, 5, 8}

def test_schedule_roundtrip():
    rounds = reduction_schedule(GridLayout(2, 3), 5)
    decoded = GridSyncDecoder().decode(GridSyncEncoder().encode(rounds))
    assert decoded == rounds

def test_topology_and_config_roundtrip():
    with in_tempdir():
        topo = round_topology(GridLayout(2, 2), 1)
        save_gridsync_object(topo, 'topo.json')
        loaded = load_gridsync_object('topo.json')
        assert loaded.name == topo.name
        assert loaded.links == topo.links

        save_gridsync_object(GridConfig(4, 2, 7), 'config.json')
        assert load_gridsync_object('config.json') == GridConfig(4, 2, 7)

def test_unknown_type_warns():
    with pytest.warns(UserWarning):
        GridSyncDecoder().decode('{"gridsync_type": "bogus"}')
