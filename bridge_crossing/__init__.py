"""
Bridge Crossing Planner

Core modules:
- models: actors and holding areas
- crossing: the three-area crossing state and its legal moves
- snapshots: the plan history and its total time
- engine: the greedy crossing strategy
- trace / reporting: read-only views of a finished plan (no behavior changes)
"""
