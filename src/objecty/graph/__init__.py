"""Recursive object-graph algorithms: clone, merge, diff, assign and project."""

from objecty.graph.assign import assign, assign_own, project
from objecty.graph.clone import clone, clone_with_ancestry
from objecty.graph.diff import changes
from objecty.graph.merge import merge, merge_arrays, merge_safe

__all__ = [
    # Clone
    "clone",
    "clone_with_ancestry",
    # Merge
    "merge",
    "merge_safe",
    "merge_arrays",
    # Diff
    "changes",
    # Assign
    "assign",
    "assign_own",
    "project",
]
