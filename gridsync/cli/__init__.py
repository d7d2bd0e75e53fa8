# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from .query import *
from .topology import make_topologies
from .analyze import make_analyses
