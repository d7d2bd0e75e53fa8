# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from gridsync import *

import os
import tempfile
import shutil

class in_tempdir:
    '''Context manager for changing to a temporary directory.'''
    def __init__(self):
        self.tempdir = tempfile.mkdtemp()

    def __enter__(self):
        self.cwd = os.getcwd()
        os.chdir(self.tempdir)

    def __exit__(self, etype, value, traceback):
        os.chdir(self.cwd)
        shutil.rmtree(self.tempdir)

def small_layouts():
    return [GridLayout(scale, dim) for scale in range(1, 5) for dim in range(0, 4)]
