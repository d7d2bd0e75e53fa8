# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from .common import *
from gridsync.serialization import *

import os
import subprocess
import sys

GRIDSYNC = f'{sys.executable} -m gridsync'

def _output(args):
    return subprocess.run(f'{GRIDSYNC} {args}', shell=True, capture_output=True, text=True)

def test_run_as_module():
    assert 0 == os.system(f'{GRIDSYNC} --help')

def test_layout():
    result = _output('layout -s 2 -D 2')
    assert result.returncode == 0
    assert 'Grid(scale=2,dim=2): 4 members' in result.stdout
    with in_tempdir():
        assert 0 == os.system(f'{GRIDSYNC} layout -s 2 -D 2 -o layout.json')
        assert load_gridsync_object('layout.json') == GridLayout(2, 2)
        assert 0 == os.system(f'{GRIDSYNC} layout -s 3 -D 2 -o layout.json')
        assert load_gridsync_object('layout.json') == GridLayout(2, 2)
        assert 0 == os.system(f'{GRIDSYNC} layout -s 3 -D 2 -o layout.json --force')
        assert load_gridsync_object('layout.json') == GridLayout(3, 2)
        assert 0 == os.system(f'{GRIDSYNC} layout --layout-file layout.json -D 1')

def test_members_and_groups():
    result = _output('members -s 2 -D 2 0 1')
    assert result.returncode == 0
    assert result.stdout.strip() == '2 3'
    result = _output('groups -s 2 -D 2 3')
    assert result.returncode == 0
    assert result.stdout.splitlines() == ['GridGroup(axis=0,position=1)', 'GridGroup(axis=1,position=1)']

def test_out_of_range():
    assert _output('members -s 2 -D 2 2 0').returncode != 0
    assert _output('members -s 2 -D 2 0 2').returncode != 0
    assert _output('groups -s 2 -D 2 4').returncode != 0
    assert _output('groups -s 0 -D 2 0').returncode != 0
    assert _output('groups 0').returncode != 0

def test_environment_config():
    env = dict(os.environ, GRIDSYNC_SCALE='3', GRIDSYNC_DIM='1', GRIDSYNC_MEMBER='1')
    result = subprocess.run(f'{GRIDSYNC} groups', shell=True, capture_output=True, text=True, env=env)
    assert result.returncode == 0
    assert result.stdout.strip() == 'GridGroup(axis=0,position=1)'

def test_schedule():
    result = _output('schedule -s 2 -D 2 3')
    assert result.returncode == 0
    assert 'Round 0: GridGroup(axis=0,position=1) peers [2]' in result.stdout
    with in_tempdir():
        assert 0 == os.system(f'{GRIDSYNC} schedule -s 2 -D 2 3 -d .')
        assert len(os.listdir('.')) == 1

def test_verify():
    assert 0 == os.system(f'{GRIDSYNC} verify -s 3 -D 3')

def test_topologies():
    with in_tempdir():
        assert 0 == os.system(f'{GRIDSYNC} topology round -s 2 -D 2 --axis 1 -o round.json')
        topo = load_gridsync_object('round.json')
        assert topo.num_nodes() == 4
        assert 0 != os.system(f'{GRIDSYNC} topology round -s 2 -D 2 --axis 2 --no-save')
        assert 0 == os.system(f'{GRIDSYNC} topology grid -s 2 -D 3 -d .')
        assert 0 == os.system(f'{GRIDSYNC} topology flat -s 2 -D 3 --no-save')
        assert len(os.listdir('.')) == 2

def test_analyze():
    result = _output('analyze costs -s 4 -D 2 --size 256MB')
    assert result.returncode == 0
    assert 'total' in result.stdout
    assert _output('analyze costs -s 4 -D 2 --size lots').returncode != 0
    result = _output('analyze connections -s 4 -D 3')
    assert result.returncode == 0
    assert 'Peers per member' in result.stdout

def test_command_line_member_replaces_environment_member():
    env = dict(os.environ, GRIDSYNC_SCALE='3', GRIDSYNC_DIM='2', GRIDSYNC_MEMBER='5')
    result = subprocess.run(f'{GRIDSYNC} groups -D 1 1', shell=True, capture_output=True, text=True, env=env)
    assert result.returncode == 0
    assert result.stdout.strip() == 'GridGroup(axis=0,position=1)'
    result = subprocess.run(f'{GRIDSYNC} schedule -D 1 2', shell=True, capture_output=True, text=True, env=env)
    assert result.returncode == 0
    assert 'Round 0: GridGroup(axis=0,position=2) peers []' in result.stdout
    # The environment member no longer fits, and none was given
    result = subprocess.run(f'{GRIDSYNC} groups -D 1', shell=True, capture_output=True, text=True, env=env)
    assert result.returncode != 0
    assert 'a member is required' in result.stderr
    result = subprocess.run(f'{GRIDSYNC} groups -D 1 3', shell=True, capture_output=True, text=True, env=env)
    assert result.returncode != 0
    assert 'Member 3 is not in Grid(scale=3,dim=1)' in result.stderr

def test_malformed_layout_file():
    with in_tempdir():
        with open('broken.json', 'w') as f:
            f.write('{')
        result = _output('groups --layout-file broken.json 0')
        assert result.returncode != 0
        assert 'is not valid JSON' in result.stderr
        assert 'Traceback' not in result.stderr

def test_output_paths():
    with in_tempdir():
        os.mkdir('out')
        result = _output('topology grid -s 2 -D 2 -o out')
        assert result.returncode != 0
        assert 'did you mean to use -d?' in result.stderr
        result = _output('topology grid -s 2 -D 2 -d missing')
        assert result.returncode != 0
        assert 'does not exist' in result.stderr
        os.mkdir(os.path.join('out', 'Grid.scale2.dim2.gridsync.json'))
        result = _output('topology grid -s 2 -D 2 -d out')
        assert result.returncode != 0
        assert 'is a directory' in result.stderr
        assert 'Traceback' not in result.stderr
