# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from .known_layouts import KnownLayout
from .common import *
from gridsync.analysis import *
import humanfriendly

def make_analyses(cmd_parsers):
    handler_funcs = []
    handler_funcs.append(make_handle_costs)
    handler_funcs.append(make_handle_connections)

    return make_cmd_category(cmd_parsers, 'analyze', 'analysis', handler_funcs)

def make_handle_costs(cmd_parsers):
    cmd = cmd_parsers.add_parser('costs')
    layouts = KnownLayout(cmd)
    cmd.add_argument('--size', type=str, default='1MB', help='payload size of each member, e.g. 256MB', metavar='SIZE')

    def handle(args, command):
        if command != 'costs':
            return False

        layout = layouts.create(args)
        try:
            costs = round_costs(layout, args.size)
        except (ValueError, humanfriendly.InvalidSize) as e:
            cmd.error(f'could not use --size {args.size}: {e}')
        print(format_round_costs(costs))
        return True

    return handle

def make_handle_connections(cmd_parsers):
    cmd = cmd_parsers.add_parser('connections')
    layouts = KnownLayout(cmd)

    def handle(args, command):
        if command != 'connections':
            return False

        layout = layouts.create(args)
        print(format_connection_summary(connection_summary(layout)))
        return True

    return handle
