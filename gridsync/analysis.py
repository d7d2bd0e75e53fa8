# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from gridsync.layout import GridLayout

from dataclasses import dataclass
import humanfriendly
from tabulate import tabulate

@dataclass(frozen=True)
class RoundCost:
    axis: int
    peers: int
    bytes_in: int
    bytes_sent: int
    bytes_out: int

def _parse_size(size):
    if isinstance(size, str):
        size = humanfriendly.parse_size(size)
    if size < 0:
        raise ValueError(f'Payload size must be non-negative, but {size} was given.')
    return size

def round_costs(layout: GridLayout, size):
    '''
    Estimates the traffic of the reduce-scatter half of a grid allreduce for a payload of the given size. In each
    round a member splits the data it holds into one chunk per member of its group, sends every peer in the group the
    chunk that peer owns and keeps its own reduced chunk for the next round. The all-gather half mirrors these costs
    in reverse order.
    '''
    size = _parse_size(size)
    costs = []
    held = size
    for group in layout.groups(0):
        group_size = len(layout.members(group))
        chunk = held // group_size
        costs.append(RoundCost(group.axis, group_size - 1, held, chunk * (group_size - 1), chunk))
        held = chunk
    return costs

def distinct_peers(layout: GridLayout, member=0):
    '''
    Returns the members that member exchanges data with in any round, which are those sharing its position on at
    least one axis.
    '''
    peers = set()
    for axis in range(layout.dim):
        peers.update(layout.peers(member, axis))
    return sorted(peers)

def connection_summary(layout: GridLayout):
    '''
    Compares the distinct peers of a member under the grid against a flat exchange where every member talks to every
    other member.
    '''
    # Every member has the same number of peers
    grid_peers = len(distinct_peers(layout))
    flat_peers = layout.total - 1
    return {
        'members': layout.total,
        'rounds': layout.dim,
        'grid_peers': grid_peers,
        'flat_peers': flat_peers,
        'grid_connections': layout.total * grid_peers // 2,
        'flat_connections': layout.total * flat_peers // 2,
    }

def format_round_costs(costs):
    headers = ['Round', 'Peers', 'Held', 'Sent', 'Kept']
    rows = [[c.axis, c.peers, humanfriendly.format_size(c.bytes_in), humanfriendly.format_size(c.bytes_sent),
        humanfriendly.format_size(c.bytes_out)] for c in costs]
    sent = sum(c.bytes_sent for c in costs)
    rows.append(['total', '', '', humanfriendly.format_size(sent), ''])
    return tabulate(rows, headers=headers, tablefmt='github')

def format_connection_summary(summary):
    rows = [
        ['Members', summary['members'], summary['members']],
        ['Rounds', summary['rounds'], 1],
        ['Peers per member', summary['grid_peers'], summary['flat_peers']],
        ['Connections', summary['grid_connections'], summary['flat_connections']],
    ]
    return tabulate(rows, headers=['', 'Grid', 'Flat'], tablefmt='github')

def format_layout(layout: GridLayout):
    headers = ['Member'] + [f'Axis {axis}' for axis in range(layout.dim)]
    rows = [[member] + list(coordinate) for member, coordinate in enumerate(layout.coordinates())]
    return tabulate(rows, headers=headers, tablefmt='github')
