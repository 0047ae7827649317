"""Width and view-offset arithmetic

Symbol units are editor cells, pixels are niri logical pixels. The
conversion uses a fixed glyph advance (config.PIXELS_PER_SYMBOL).
"""

from . import config
from .adapters.base import EditorClient, PaneGeometry
from .layout.builder import ColumnLayout


def to_pixels(symbols: float, pixels_per_symbol: float = config.PIXELS_PER_SYMBOL) -> int:
    """Convert symbol units to whole pixels.

    Args:
        symbols: width in editor cells
        pixels_per_symbol: glyph advance, px

    Returns:
        Rounded pixel width
    """
    return round(symbols * pixels_per_symbol)


def desired_symbol_width(
    layout: ColumnLayout,
    editor: EditorClient,
    koeff: float = config.COLUMN_WIDTH_KOEFF,
) -> int:
    """Frame width that gives every column room for its content.

    Args:
        layout: reconstructed columns
        editor: used to read the textwidth of each pane
        koeff: padding factor applied to each column textwidth

    Returns:
        Sum of ``koeff * textwidth`` over all columns, rounded
    """
    return round(sum(koeff * column.textwidth(editor) for column in layout.columns))


def desired_pixel_width(
    layout: ColumnLayout,
    editor: EditorClient,
    koeff: float = config.COLUMN_WIDTH_KOEFF,
    pixels_per_symbol: float = config.PIXELS_PER_SYMBOL,
) -> int:
    """desired_symbol_width converted to pixels."""
    return to_pixels(desired_symbol_width(layout, editor, koeff), pixels_per_symbol)


def current_pixel_width(
    layout: ColumnLayout,
    pixels_per_symbol: float = config.PIXELS_PER_SYMBOL,
) -> int:
    """Pixel width the columns occupy right now.

    Returns:
        Right edge of the last column, px; 0 without columns
    """
    return to_pixels(layout.current_symbol_width(), pixels_per_symbol)


def pane_pixel_interval(
    pane: PaneGeometry,
    pixels_per_symbol: float = config.PIXELS_PER_SYMBOL,
) -> tuple[float, float]:
    """Horizontal pixel interval ``[start, end)`` of a pane.

    The separator column left of the pane is part of it.

    Args:
        pane: geometry of the pane, in symbols
        pixels_per_symbol: glyph advance, px

    Returns:
        ``(start, end)`` in px from the left edge of the editor
    """
    start = max(pane.col - config.SEPARATOR_WIDTH, 0) * pixels_per_symbol
    end = (pane.col + pane.width) * pixels_per_symbol
    return start, end


def compute_view_offset(
    view_offset: float,
    viewport_width: float,
    start: float,
    end: float,
) -> float | None:
    """New view offset that brings ``[start, end)`` into the viewport.

    Args:
        view_offset: current offset of the view, px
        viewport_width: visible width, px
        start, end: interval that must be visible, px

    Returns:
        The offset to set, or None when the interval is already visible.
        The trailing edge wins when the interval is wider than the viewport.
    """
    if view_offset + viewport_width < end:
        return end - viewport_width
    if view_offset > start:
        return start
    return None
