"""Comment view transformation and thread tree assembly."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from discuss.domain.model.comment import Comment
from discuss.domain.model.view import CommentView
from discuss.domain.value import CommentFlag, CommentId


def transform_comment(comment: Comment) -> CommentView:
    """Normalize a stored comment into its API view.

    Missing optional fields fall back to defaults: no parent, public, and
    an empty body.

    Args:
        comment: Stored comment

    Returns:
        Comment view without children
    """
    private = 1 if comment.is_private else 0
    return CommentView(
        cid=comment.cid,
        pid=comment.pid or None,
        uid=comment.uid,
        created=comment.created,
        changed=comment.changed,
        private=private,
        raw=comment.body or "",
        flags=[CommentFlag.PRIVATE] if private else [],
    )


@dataclass
class CommentTree:
    """Forest of comment views for one tracker.

    All views live in ``nodes`` keyed by cid; ``children`` maps a cid to
    the ids of its direct replies in ascending order. Only views reachable
    from ``roots`` belong to the thread.
    """

    nodes: dict[CommentId, CommentView] = field(default_factory=dict)
    children: dict[CommentId, list[CommentId]] = field(default_factory=dict)
    roots: list[CommentId] = field(default_factory=list)
    orphans: list[CommentId] = field(default_factory=list)

    def children_of(self, cid: CommentId) -> list[CommentView]:
        """Direct replies of a comment."""
        return [self.nodes[child] for child in self.children.get(cid, [])]

    def root_views(self) -> list[CommentView]:
        """Top-level comments."""
        return [self.nodes[cid] for cid in self.roots]

    def walk(self) -> Iterator[CommentView]:
        """Yield every reachable comment in pre-order, root by root."""
        stack = list(reversed(self.roots))
        while stack:
            cid = stack.pop()
            yield self.nodes[cid]
            stack.extend(reversed(self.children.get(cid, [])))


def build_comment_tree(views: Iterable[CommentView]) -> CommentTree:
    """Assemble flat comment views into a forest.

    Views are visited in ascending cid order. Ids are assigned at creation
    and a reply is always created after its parent, so a parent is indexed
    before any of its replies. A view whose parent is not in the set is
    dropped together with its replies rather than promoted to the top level.

    Args:
        views: Comment views for one tracker, in any order

    Returns:
        The assembled tree; identical for any ordering of the same views
    """
    tree = CommentTree()
    for view in sorted(views, key=lambda v: v.cid):
        tree.nodes[view.cid] = view
        tree.children[view.cid] = []
        if not view.pid:
            tree.roots.append(view.cid)
            continue
        siblings = tree.children.get(view.pid)
        if siblings is None:
            tree.orphans.append(view.cid)
            continue
        siblings.append(view.cid)
    return tree
