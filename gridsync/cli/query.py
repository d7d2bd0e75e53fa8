# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from .known_layouts import KnownLayout
from .common import *
from gridsync.analysis import format_layout
from gridsync.errors import OutOfRangeError
from gridsync.layout import GridGroup
from gridsync.schedule import reduction_schedule, verify_layout

def make_handle_layout(cmd_parsers):
    name = 'layout'
    cmd = cmd_parsers.add_parser(name)
    layouts = KnownLayout(cmd)
    validate_output_args, output_handler = add_output_gridsync_object(cmd, save_by_default=False)

    def handle(args, command):
        if command != name:
            return False

        validate_output_args(args)
        layout = layouts.create(args)
        print(f'{layout.name}: {layout.total} members')
        print(format_layout(layout))
        output_handler(args, layout, layout.name)
        return True

    return handle

def make_handle_members(cmd_parsers):
    name = 'members'
    cmd = cmd_parsers.add_parser(name)
    layouts = KnownLayout(cmd)
    cmd.add_argument('axis', type=int, help='axis of the group')
    cmd.add_argument('position', type=int, help='position of the group along the axis')

    def handle(args, command):
        if command != name:
            return False

        layout = layouts.create(args)
        group = GridGroup(args.axis, args.position)
        try:
            members = layout.members(group)
        except OutOfRangeError as e:
            cmd.error(str(e))
        print(' '.join(str(m) for m in sorted(members)))
        return True

    return handle

def _layout_and_member(cmd, layouts, args):
    # A member given on the command line replaces GRIDSYNC_MEMBER and is checked against the layout
    config = layouts.config(args, member=args.member)
    if config.member == None:
        cmd.error('a member is required, either as an argument or through GRIDSYNC_MEMBER')
    return config.layout(), config.member

def make_handle_groups(cmd_parsers):
    name = 'groups'
    cmd = cmd_parsers.add_parser(name)
    layouts = KnownLayout(cmd)
    cmd.add_argument('member', type=int, nargs='?', default=None, help='member index, defaults to GRIDSYNC_MEMBER')

    def handle(args, command):
        if command != name:
            return False

        layout, member = _layout_and_member(cmd, layouts, args)
        for group in layout.groups(member):
            print(group)
        return True

    return handle

def make_handle_schedule(cmd_parsers):
    name = 'schedule'
    cmd = cmd_parsers.add_parser(name)
    layouts = KnownLayout(cmd)
    cmd.add_argument('member', type=int, nargs='?', default=None, help='member index, defaults to GRIDSYNC_MEMBER')
    validate_output_args, output_handler = add_output_gridsync_object(cmd, save_by_default=False)

    def handle(args, command):
        if command != name:
            return False

        validate_output_args(args)
        layout, member = _layout_and_member(cmd, layouts, args)
        rounds = reduction_schedule(layout, member)
        for r in rounds:
            print(f'Round {r.index}: {r.group} peers {list(r.peers(member))}')
        output_handler(args, rounds, f'Schedule(scale={layout.scale},dim={layout.dim},member={member})')
        return True

    return handle

def make_handle_verify(cmd_parsers):
    name = 'verify'
    cmd = cmd_parsers.add_parser(name)
    layouts = KnownLayout(cmd)

    def handle(args, command):
        if command != name:
            return False

        layout = layouts.create(args)
        if not verify_layout(layout, logging=True):
            exit(1)
        return True

    return handle
