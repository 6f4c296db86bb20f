"""Order tree matching.

An order tree is a nested, insertion-ordered mapping from lower-cased keys
to sub-trees. The position of a key among its siblings is its rank. A value
that is not a mapping (usually None) marks a key that is listed but carries
no preference below it.

Two keys are reserved:

- ``*`` matches any key not listed at its node, for exactly one level.
- ``**`` matches any key not otherwise resolved at its node or at any level
  below it, until a deeper node declares its own ``**``.

Resolution order for a key against a context:
1. Explicit entry in the current node (EXPLICIT, ranked)
2. ``*`` entry in the current node (SINGLE_WILDCARD)
3. Explicit entry in the inherited ``**`` node (DEEP_WILDCARD, ranked)
4. No match (NONE)
"""

from collections.abc import Iterator, Mapping
from enum import IntEnum
from typing import Any, NamedTuple

from story_sort.ordering.keys import PathKey

SINGLE_WILDCARD = "*"
DEEP_WILDCARD = "**"
RESERVED_KEYS: frozenset[str] = frozenset({SINGLE_WILDCARD, DEEP_WILDCARD})

# An order node is a Mapping[str, OrderNode | None]; anything else is terminal.
OrderNode = Mapping[str, Any]


class MatchTier(IntEnum):
    """How specifically a key was matched. Higher values sort first."""

    NONE = 0
    DEEP_WILDCARD = 1
    SINGLE_WILDCARD = 2
    EXPLICIT = 3

    @property
    def ranked(self) -> bool:
        """Whether matches of this tier carry a rank."""
        return self in (MatchTier.EXPLICIT, MatchTier.DEEP_WILDCARD)


class MatchContext(NamedTuple):
    """Position in the order tree carried from one path level to the next.

    Attributes:
        current: Node to look the next key up in, or None when the branch
            has no explicit structure left.
        catch_all: Sub-node of the nearest ``**`` declared above, or None.

    """

    current: Any
    catch_all: Any = None


class Resolution(NamedTuple):
    """Result of matching one key against a context.

    Attributes:
        tier: Match specificity.
        rank: Listing index of the matched key, for ranked tiers only.
        next_context: Context for the following path level.

    """

    tier: MatchTier
    rank: int | None
    next_context: MatchContext


def is_structure(node: Any) -> bool:
    """Check whether a node can hold keys (as opposed to a terminal marker)."""
    return isinstance(node, Mapping)


def ranked_keys(node: Any) -> Iterator[str]:
    """Yield the non-reserved keys of a node in listing order."""
    if not is_structure(node):
        return
    for key in node:
        if key not in RESERVED_KEYS:
            yield key


def rank_of(node: Any, lookup: str) -> int | None:
    """Return the listing index of a key among a node's non-reserved keys.

    Args:
        node: Order node to search.
        lookup: Lower-cased key.

    Returns:
        Zero-based rank, or None if the key is not explicitly listed.

    """
    if lookup in RESERVED_KEYS:
        return None
    for index, key in enumerate(ranked_keys(node)):
        if key == lookup:
            return index
    return None


def _inherit_catch_all(node: Any, catch_all: Any) -> Any:
    """Return the catch-all in effect below a node.

    A ``**`` declared at the node shadows the inherited one, even when its
    value is a terminal marker.
    """
    if is_structure(node) and DEEP_WILDCARD in node:
        return node[DEEP_WILDCARD]
    return catch_all


def _descend(sub_node: Any, catch_all: Any) -> MatchContext:
    return MatchContext(sub_node, _inherit_catch_all(sub_node, catch_all))


def resolve(context: MatchContext, key: PathKey) -> Resolution:
    """Match a path key against the order tree.

    Args:
        context: Current node and inherited catch-all node.
        key: Path key to match.

    Returns:
        Resolution holding the match tier, the rank for ranked tiers and the
        context to use at the next path level.

    Examples:
        >>> order = {"articles": None, "components": {"*": {"default": None}}}
        >>> resolve(MatchContext(order), PathKey("Components", "components")).rank
        1
        >>> resolve(MatchContext(order), PathKey("Misc", "misc")).tier
        <MatchTier.NONE: 0>

    """
    current = context.current
    catch_all = _inherit_catch_all(current, context.catch_all)

    if is_structure(current):
        rank = rank_of(current, key.lookup)
        if rank is not None:
            return Resolution(
                MatchTier.EXPLICIT, rank, _descend(current[key.lookup], catch_all)
            )
        if SINGLE_WILDCARD in current:
            return Resolution(
                MatchTier.SINGLE_WILDCARD,
                None,
                _descend(current[SINGLE_WILDCARD], catch_all),
            )

    # The deep wildcard is not consumed by a match; it stays in effect below.
    rank = rank_of(catch_all, key.lookup)
    if rank is not None:
        return Resolution(MatchTier.DEEP_WILDCARD, rank, MatchContext(None, catch_all))

    return Resolution(MatchTier.NONE, None, MatchContext(None, catch_all))
