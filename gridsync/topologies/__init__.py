# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from .topology import Topology
from .grid import *
