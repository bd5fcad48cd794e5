from __future__ import annotations

"""
Tree Layout Data Models.

Defines the geometry configuration, the cursor threaded through the layout
recursion and the drawing primitives (connectors and labels) that the
layout engine emits for the TikZ serializer.
"""

from dataclasses import dataclass, field, replace
from typing import List, Union

from mintedgen.domain.constants import (
    DEFAULT_FOLDER_LABEL_OFFSET,
    DEFAULT_HORIZONTAL_STEP,
    DEFAULT_MAX_COLUMN_HEIGHT,
    DEFAULT_PICTURE_SCALE,
    DEFAULT_VERTICAL_STEP,
    DEFAULT_WRAP_WIDTH,
)

# -----------------------------------------------------------------------------
# GEOMETRY CONFIGURATION
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LayoutConfig:
    """
    Immutable geometry of the tree picture, in TikZ picture units.

    Attributes:
        horizontal_step: Indentation added per nesting level.
        vertical_step: Distance between two consecutive nodes.
        max_column_height: Vertical extent of a column before wrapping.
        wrap_width: Horizontal shift applied per wrap column.
        scale: Scale factor of the tikzpicture environment.
        folder_label_offset: Leftward nudge of folder labels over the trunk.
    """
    horizontal_step: float = DEFAULT_HORIZONTAL_STEP
    vertical_step: float = DEFAULT_VERTICAL_STEP
    max_column_height: float = DEFAULT_MAX_COLUMN_HEIGHT
    wrap_width: float = DEFAULT_WRAP_WIDTH
    scale: float = DEFAULT_PICTURE_SCALE
    folder_label_offset: float = DEFAULT_FOLDER_LABEL_OFFSET

    def x(self, depth: int, wrap_index: int) -> float:
        """Horizontal coordinate of a node at a depth inside a wrap column."""
        return depth * self.horizontal_step + wrap_index * self.wrap_width

    def y(self, node_index: int, wrap_index: int) -> float:
        """Vertical coordinate of a node; grows downwards (more negative)."""
        return -(node_index * self.vertical_step - wrap_index * self.max_column_height)

    def overflows(self, node_index: int, wrap_index: int) -> bool:
        """True once a node would sit below the bottom of its wrap column."""
        return node_index * self.vertical_step - wrap_index * self.max_column_height > self.max_column_height


# -----------------------------------------------------------------------------
# RECURSION STATE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LayoutCursor:
    """
    Position of the layout walk.

    Attributes:
        item_index: Next input path to consume.
        node_index: Sequential index of the next node to place.
        wrap_index: Current wrap column; only ever increases.
    """
    item_index: int = 0
    node_index: int = 0
    wrap_index: int = 0

    def advance(self, items: int = 0, nodes: int = 0, wraps: int = 0) -> LayoutCursor:
        return replace(
            self,
            item_index=self.item_index + items,
            node_index=self.node_index + nodes,
            wrap_index=self.wrap_index + wraps,
        )


# -----------------------------------------------------------------------------
# DRAWING PRIMITIVES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Connector:
    """Right-angle line going down from (x1, y1) then across to (x2, y2)."""
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class FolderLabel:
    """Folder name drawn on an opaque background over the connectors."""
    text: str
    x: float
    y: float
    depth: int
    node_index: int
    wrap_index: int


@dataclass(frozen=True)
class FileLabel:
    """
    File name placed in the tree and hyperlinked to its listing.

    Attributes:
        path: Forward-slash relative path of the file.
    """
    text: str
    x: float
    y: float
    depth: int
    node_index: int
    wrap_index: int
    path: str = ""


Label = Union[FolderLabel, FileLabel]


@dataclass(frozen=True)
class LayoutResult:
    """
    Output of one layout recursion level (or of the whole tree).

    Attributes:
        cursor: Cursor after the level finished consuming its items.
        connectors: Connector commands in emission order.
        labels: Folder and file labels in emission order.
    """
    cursor: LayoutCursor = field(default_factory=LayoutCursor)
    connectors: List[Connector] = field(default_factory=list)
    labels: List[Label] = field(default_factory=list)

    @property
    def folder_labels(self) -> List[FolderLabel]:
        return [label for label in self.labels if isinstance(label, FolderLabel)]

    @property
    def file_labels(self) -> List[FileLabel]:
        return [label for label in self.labels if isinstance(label, FileLabel)]
