# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import gridsync.topologies as topologies
from .known_layouts import KnownLayout
from .common import *
from gridsync.errors import OutOfRangeError

def make_topologies(cmd_parsers):
    handler_funcs = []
    handler_funcs.append(make_handle_round_topology)
    handler_funcs.append(make_handle_grid_topology)
    handler_funcs.append(make_handle_flat_topology)

    return make_cmd_category(cmd_parsers, 'topology', 'kind', handler_funcs)

def _make_handle_topology(cmd_parsers, name, invoke):
    cmd = cmd_parsers.add_parser(name)
    layouts = KnownLayout(cmd)
    validate_output_args, output_handler = add_output_gridsync_object(cmd)

    def handle(args, command):
        if command != name:
            return False

        validate_output_args(args)
        layout = layouts.create(args)
        try:
            topology = invoke(args, layout)
        except OutOfRangeError as e:
            cmd.error(str(e))
        print(f'{topology.name}: {topology.num_nodes()} nodes, {topology.connections()} connections')
        output_handler(args, topology, topology.name)
        return True

    return cmd, handle

def make_handle_round_topology(cmd_parsers):
    def invoke(args, layout):
        return topologies.round_topology(layout, args.axis)

    cmd, handle = _make_handle_topology(cmd_parsers, 'round', invoke)
    cmd.add_argument('--axis', type=int, required=True, help='axis of the round', metavar='N')
    return handle

def make_handle_grid_topology(cmd_parsers):
    def invoke(args, layout):
        return topologies.grid_topology(layout)

    cmd, handle = _make_handle_topology(cmd_parsers, 'grid', invoke)
    return handle

def make_handle_flat_topology(cmd_parsers):
    def invoke(args, layout):
        return topologies.fully_connected(layout.total)

    cmd, handle = _make_handle_topology(cmd_parsers, 'flat', invoke)
    return handle
