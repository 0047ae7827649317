"""Column layout reconstruction

- Pane, Column: column model and merge arithmetic
- ColumnLayoutBuilder, ColumnLayout: ordered columns of one editor tab
"""

from .builder import ColumnLayout, ColumnLayoutBuilder
from .column import Column, Pane

__all__ = ["Column", "ColumnLayout", "ColumnLayoutBuilder", "Pane"]
