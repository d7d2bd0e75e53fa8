# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from typing import List

class Topology(object):
    def __init__(self, name: str, links: List[List[int]]):
        self.name = name
        self.links = links
        for dst, dst_links in enumerate(links):
            if len(dst_links) != len(links):
                raise ValueError(f'Topology {name} has {len(links)} nodes, but node {dst} has {len(dst_links)} links.')
            for src, bw in enumerate(dst_links):
                if bw < 0:
                    raise ValueError(f'Link {src}→{dst} has a negative bandwidth of {bw}. Bandwidth must be non-negative.')

    def sources(self, dst: int):
        for src, bw in enumerate(self.links[dst]):
            if bw > 0:
                yield src

    def destinations(self, src: int):
        for dst, links in enumerate(self.links):
            bw = links[src]
            if bw > 0:
                yield dst

    def link(self, src: int, dst: int):
        return self.links[dst][src]

    def num_nodes(self):
        return len(self.links)

    def nodes(self):
        return range(self.num_nodes())

    def degree(self, node: int):
        return sum(1 for _ in self.destinations(node))

    def connections(self):
        # Undirected pairs, each counted once
        return sum(1 for dst in self.nodes() for src in self.sources(dst) if src < dst)
