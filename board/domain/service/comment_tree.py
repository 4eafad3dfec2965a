"""Comment tree construction.

Comments are stored flat with a ``parent_id`` pointer. The nested view is
rebuilt on every read from one flat fetch: children are grouped by parent
in a single pass, then the tree is materialized breadth-first up to a
fixed number of levels.
"""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from typing import Iterable, Mapping
from uuid import UUID

from board.domain.model.comment import Comment
from board.domain.value import CommentId, VoteState

# Levels expanded on read, top-level comments being level 1
MAX_TREE_DEPTH = 10


@dataclass
class CommentNode:
    """A comment with its expanded replies and vote aggregation."""

    comment: Comment
    vote_state: VoteState = field(default_factory=VoteState)
    replies: list["CommentNode"] = field(default_factory=list)


def build_comment_tree(
    comments: Iterable[Comment],
    vote_states: Mapping[UUID, VoteState] | None = None,
    max_depth: int = MAX_TREE_DEPTH,
) -> list[CommentNode]:
    """Build the nested comment tree of a post.

    Top-level comments are ordered oldest first; replies at every level are
    ordered newest first. Nodes deeper than ``max_depth`` levels are left
    out of the result without error. Comments whose parent is not in the
    input are dropped.

    Args:
        comments: Every comment of one post, in any order
        vote_states: Vote aggregation per comment ID
        max_depth: Number of levels to expand

    Returns:
        Root nodes of the tree
    """
    vote_states = vote_states or {}

    roots: list[Comment] = []
    children: dict[CommentId, list[Comment]] = defaultdict(list)
    for comment in comments:
        if comment.parent_id is None:
            roots.append(comment)
        else:
            children[comment.parent_id].append(comment)

    roots.sort(key=lambda c: c.created_at)
    for siblings in children.values():
        siblings.sort(key=lambda c: c.created_at, reverse=True)

    def make_node(comment: Comment) -> CommentNode:
        return CommentNode(
            comment=comment,
            vote_state=vote_states.get(comment.id, VoteState()),
        )

    if max_depth < 1:
        return []

    tree = [make_node(c) for c in roots]

    queue: deque[tuple[CommentNode, int]] = deque((node, 1) for node in tree)
    while queue:
        node, level = queue.popleft()
        if level >= max_depth:
            continue
        for reply in children.get(node.comment.id, []):
            child = make_node(reply)
            node.replies.append(child)
            queue.append((child, level + 1))

    return tree


def count_nodes(tree: list[CommentNode]) -> int:
    """Count the nodes present in a materialized tree."""
    total = 0
    stack = list(tree)
    while stack:
        node = stack.pop()
        total += 1
        stack.extend(node.replies)
    return total
