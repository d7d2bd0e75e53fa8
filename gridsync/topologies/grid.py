# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from .topology import Topology

def fully_connected(num_nodes):
    links = []
    for i in range(num_nodes):
        row = [1] * num_nodes
        row[i] = 0
        links.append(row)
    return Topology(f'FullyConnected(n={num_nodes})', links)

def round_topology(layout, axis):
    '''
    Connects every pair of members that exchange data in the round for the given axis.
    '''
    links = [[0] * layout.total for _ in range(layout.total)]
    for dst in layout.nodes():
        for src in layout.peers(dst, axis):
            links[dst][src] = 1
    return Topology(f'GridRound(scale={layout.scale},dim={layout.dim},axis={axis})', links)

def grid_topology(layout):
    '''
    Connects every pair of members that exchange data in any round, which are the members sharing their position on
    at least one axis.
    '''
    links = [[0] * layout.total for _ in range(layout.total)]
    for axis in range(layout.dim):
        for dst in layout.nodes():
            for src in layout.peers(dst, axis):
                links[dst][src] = 1
    return Topology(f'Grid(scale={layout.scale},dim={layout.dim})', links)
