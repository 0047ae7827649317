"""niriglue - glue between the niri compositor and the editors running in it

Reconstructs the column layout of an editor frame from its pane rectangles
and uses it to size the niri window, keep the focused pane in view, and
route directional commands between the editor and niri.
"""

__version__ = "0.1.0"
