"""Flow and spanning-tree engines with their supporting data structures.

Modules:
    heap: binary min-heap used as the Prim frontier.
    residual: residual-capacity graph for Ford-Fulkerson.
    dfs: depth-first augmenting-path search.
    max_flow: Ford-Fulkerson augmentation loop and flow summary.
    mst: Prim's algorithm with lazy deletion.
    observers: event hooks for tracing both engines.
"""
