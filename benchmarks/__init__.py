"""Performance benchmarks for nodesandedges.

This package contains microbenchmarks for hot paths in the library,
including text-format parsing and breadth-first and depth-first search.
"""
