# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from gridsync.errors import ConfigurationError, OutOfRangeError

from dataclasses import dataclass
from typing import FrozenSet, List, Tuple

Coordinate = Tuple[int, ...]

@dataclass(frozen=True, order=True)
class GridGroup:
    axis: int
    position: int

    def __str__(self):
        return f'GridGroup(axis={self.axis},position={self.position})'

def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)

def gen_coordinates(scale: int, dim: int) -> List[Coordinate]:
    '''
    Enumerates every coordinate of a grid with dim axes and scale positions per axis. The position of a coordinate
    in the returned list is its member index, so the last axis varies fastest.
    '''
    if dim == 0:
        return [()]
    coordinates = []
    for prefix in gen_coordinates(scale, dim - 1):
        for i in range(scale):
            coordinates.append(prefix + (i,))
    return coordinates

class GridLayout(object):
    '''
    Layout of scale ** dim members on a grid. Each member belongs to exactly one group per axis, which is the set of
    members sharing its position on that axis. The layout is immutable once constructed.
    '''

    def __init__(self, scale: int, dim: int):
        if not _is_int(scale) or scale < 1:
            raise ConfigurationError(f'Grid scale must be a positive integer, but {scale!r} was given.')
        if not _is_int(dim) or dim < 0:
            raise ConfigurationError(f'Grid dim must be a non-negative integer, but {dim!r} was given.')
        self._scale = scale
        self._dim = dim
        self._total = scale ** dim
        self._coordinates = tuple(gen_coordinates(scale, dim))

        # Members of every group, indexed by [axis][position]
        index = [[[] for _ in range(scale)] for _ in range(dim)]
        for member, coordinate in enumerate(self._coordinates):
            for axis, position in enumerate(coordinate):
                index[axis][position].append(member)
        self._group_members = tuple(tuple(frozenset(ms) for ms in axis_groups) for axis_groups in index)

    @property
    def scale(self) -> int:
        return self._scale

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def total(self) -> int:
        return self._total

    @property
    def name(self):
        return f'Grid(scale={self._scale},dim={self._dim})'

    def _check_member(self, member):
        if not _is_int(member) or not 0 <= member < self._total:
            raise OutOfRangeError(f'Member {member!r} is not in {self.name}, valid members are 0 to {self._total - 1}.')

    def _check_axis(self, axis):
        if not _is_int(axis) or not 0 <= axis < self._dim:
            raise OutOfRangeError(f'Axis {axis!r} is not in {self.name}, which has {self._dim} axes.')

    def members(self, group: GridGroup) -> FrozenSet[int]:
        '''
        Returns the members of the group, i.e. all members whose coordinate on group.axis is group.position.
        '''
        self._check_axis(group.axis)
        if not _is_int(group.position) or not 0 <= group.position < self._scale:
            raise OutOfRangeError(f'Position {group.position!r} on axis {group.axis} is not in {self.name}, valid positions are 0 to {self._scale - 1}.')
        return self._group_members[group.axis][group.position]

    def groups(self, member: int) -> List[GridGroup]:
        '''
        Returns the groups the member belongs to, one per axis in increasing axis order.
        '''
        self._check_member(member)
        return [GridGroup(axis, position) for axis, position in enumerate(self._coordinates[member])]

    def coordinate(self, member: int) -> Coordinate:
        self._check_member(member)
        return self._coordinates[member]

    def coordinates(self):
        return self._coordinates

    def member_index(self, coordinate) -> int:
        coordinate = tuple(coordinate)
        if len(coordinate) != self._dim:
            raise OutOfRangeError(f'Coordinate {coordinate} has {len(coordinate)} entries, but {self.name} has {self._dim} axes.')
        index = 0
        for position in coordinate:
            if not _is_int(position) or not 0 <= position < self._scale:
                raise OutOfRangeError(f'Coordinate {coordinate} is not in {self.name}, valid positions are 0 to {self._scale - 1}.')
            index = index * self._scale + position
        return index

    def all_groups(self):
        return [GridGroup(axis, position) for axis in range(self._dim) for position in range(self._scale)]

    def peers(self, member: int, axis: int) -> List[int]:
        '''
        Returns the other members the member exchanges data with in the round for axis.
        '''
        self._check_member(member)
        self._check_axis(axis)
        position = self._coordinates[member][axis]
        return sorted(m for m in self._group_members[axis][position] if m != member)

    def nodes(self):
        return range(self._total)

    def __eq__(self, other):
        if not isinstance(other, GridLayout):
            return NotImplemented
        return self._scale == other._scale and self._dim == other._dim

    def __hash__(self):
        return hash((self._scale, self._dim))

    def __repr__(self):
        return f'GridLayout(scale={self._scale}, dim={self._dim})'

    def __str__(self):
        return self.name
