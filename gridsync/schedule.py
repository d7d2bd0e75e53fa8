# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from gridsync.layout import GridGroup, GridLayout
from gridsync.errors import OutOfRangeError

from dataclasses import dataclass
from typing import List, Tuple

@dataclass(frozen=True)
class Round:
    index: int
    group: GridGroup
    members: Tuple[int, ...]

    def peers(self, member):
        if member not in self.members:
            raise OutOfRangeError(f'Member {member} does not take part in round {self.index} of {self.group}.')
        return tuple(m for m in self.members if m != member)

    def __str__(self):
        return f'round={self.index},{self.group},members={list(self.members)}'

def reduction_schedule(layout: GridLayout, member: int) -> List[Round]:
    '''
    Returns the rounds the member takes part in, one per axis of the layout in the order they must run.
    '''
    return [Round(group.axis, group, tuple(sorted(layout.members(group)))) for group in layout.groups(member)]

def verify_layout(layout: GridLayout, logging=False):
    '''
    Checks that every axis partitions the members into equally sized groups and that every member is found in each of
    the groups reported for it.
    '''
    group_size = layout.total // layout.scale
    all_members = set(layout.nodes())

    for axis in range(layout.dim):
        seen = set()
        for position in range(layout.scale):
            members = layout.members(GridGroup(axis, position))
            if len(members) != group_size:
                if logging:
                    print(f'Group at axis {axis} position {position} has {len(members)} members, expected {group_size}')
                return False
            if not seen.isdisjoint(members):
                if logging:
                    print(f'Groups on axis {axis} overlap at members {sorted(seen & members)}')
                return False
            seen |= members
        if seen != all_members:
            if logging:
                print(f'Groups on axis {axis} miss members {sorted(all_members - seen)}')
            return False
        if logging:
            print(f'Axis {axis}: {layout.scale} groups of {group_size} members')

    for member in layout.nodes():
        groups = layout.groups(member)
        if len(groups) != layout.dim:
            if logging:
                print(f'Member {member} is in {len(groups)} groups, expected {layout.dim}')
            return False
        for group in groups:
            if member not in layout.members(group):
                if logging:
                    print(f'Member {member} is missing from its own {group}')
                return False
        if layout.member_index(layout.coordinate(member)) != member:
            if logging:
                print(f'Coordinate {layout.coordinate(member)} does not encode member {member}')
            return False

    if logging:
        print(f'{layout.name} is consistent: {layout.total} members in {layout.dim} rounds')
    return True
