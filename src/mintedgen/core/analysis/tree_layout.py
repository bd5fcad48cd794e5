from __future__ import annotations

"""
Tree Layout Engine.

Converts a flat, pre-order list of relative file paths into the connectors
and labels of an indented, left-to-right tree picture. The walk recurses
once per folder level and threads an immutable cursor (item, node, wrap)
through the calls; every level returns its own commands, which the caller
appends to its own in order. Tall trees spill into additional wrap columns
to the right.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from mintedgen.domain.layout_models import (
    Connector,
    FileLabel,
    FolderLabel,
    Label,
    LayoutConfig,
    LayoutCursor,
    LayoutResult,
)
from mintedgen.domain.path_models import PathInfo

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def layout_tree(
        paths: Sequence[PathInfo],
        config: Optional[LayoutConfig] = None,
) -> LayoutResult:
    """
    Lay out the whole tree rooted at the first segment of every path.

    Args:
        paths: Relative paths in pre-order, all sharing the same root segment.
        config: Picture geometry. Defaults to LayoutConfig().

    Returns:
        LayoutResult: Final cursor plus every connector and label.
    """
    cfg = config or LayoutConfig()
    if not paths:
        logger.debug("No paths to lay out; tree picture will be empty.")
        return LayoutResult()

    result = layout_subtree(paths, LayoutCursor(), 0, cfg)

    if result.cursor.item_index != len(paths):
        logger.warning(
            f"Tree layout consumed {result.cursor.item_index} of {len(paths)} paths; "
            f"input is not a single pre-order tree."
        )
    else:
        logger.debug(
            f"Tree layout placed {result.cursor.node_index} nodes "
            f"across {result.cursor.wrap_index + 1} column(s)."
        )
    return result


def layout_subtree(
        paths: Sequence[PathInfo],
        cursor: LayoutCursor,
        depth: int,
        config: LayoutConfig,
) -> LayoutResult:
    """
    Lay out the folder found at `depth` in the path under the cursor.

    Emits the folder's label (and, below the root, the connectors linking it
    to the previous node), then consumes its direct files and recurses into
    its subfolders until the next path leaves the folder.

    Args:
        paths: Full pre-order path list.
        cursor: Where this folder starts.
        depth: Nesting level of the folder (0 for the root).
        config: Picture geometry.

    Returns:
        LayoutResult: Cursor after the folder's subtree and its commands.
    """
    connectors: List[Connector] = []
    labels: List[Label] = []

    folder_segments = paths[cursor.item_index].segments[:depth + 1]
    current_folder = folder_segments[-1]

    # Folder node
    if depth != 0:
        connectors.append(_elbow(config, depth - 1, cursor))
        connectors.extend(_trunk(config, depth - 1, cursor))

    labels.append(FolderLabel(
        text=current_folder,
        x=config.x(depth, cursor.wrap_index),
        y=config.y(cursor.node_index, cursor.wrap_index),
        depth=depth,
        node_index=cursor.node_index,
        wrap_index=cursor.wrap_index,
    ))
    depth += 1
    cursor = cursor.advance(nodes=1)

    while cursor.item_index < len(paths):
        item = paths[cursor.item_index]
        segments = item.segments
        node_depth = len(segments) - 1

        if not _is_inside(segments, folder_segments):
            break

        if node_depth > depth:
            # Subfolder started
            child = layout_subtree(paths, cursor, depth, config)
            connectors.extend(child.connectors)
            labels.extend(child.labels)
            cursor = child.cursor
        elif node_depth == depth:
            # Direct file child
            connectors.extend(_trunk(config, depth - 1, cursor))
            connectors.append(_elbow(config, depth - 1, cursor))
            labels.append(FileLabel(
                text=segments[depth],
                x=config.x(depth, cursor.wrap_index),
                y=config.y(cursor.node_index, cursor.wrap_index),
                depth=depth,
                node_index=cursor.node_index,
                wrap_index=cursor.wrap_index,
                path=item.with_separator("/"),
            ))
            cursor = cursor.advance(items=1, nodes=1)
            if config.overflows(cursor.node_index, cursor.wrap_index):
                cursor = cursor.advance(wraps=1)
        else:
            break

    return LayoutResult(cursor=cursor, connectors=connectors, labels=labels)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_inside(segments: Tuple[str, ...], folder_segments: Tuple[str, ...]) -> bool:
    """True if a path lies somewhere below the folder."""
    return len(segments) > len(folder_segments) and segments[:len(folder_segments)] == folder_segments


def _elbow(config: LayoutConfig, parent_depth: int, cursor: LayoutCursor) -> Connector:
    """Connector from the previous node's row in the parent column to this node."""
    wrap = cursor.wrap_index
    return Connector(
        x1=config.x(parent_depth, wrap),
        y1=config.y(cursor.node_index - 1, wrap),
        x2=config.x(parent_depth + 1, wrap),
        y2=config.y(cursor.node_index, wrap),
    )


def _trunk(config: LayoutConfig, count: int, cursor: LayoutCursor) -> List[Connector]:
    """Vertical continuation of every ancestor column shallower than the parent."""
    wrap = cursor.wrap_index
    y1 = config.y(cursor.node_index - 1, wrap)
    y2 = config.y(cursor.node_index, wrap)
    return [
        Connector(x1=config.x(i, wrap), y1=y1, x2=config.x(i, wrap), y2=y2)
        for i in range(count)
    ]
