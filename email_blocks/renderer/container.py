"""
Renderer du bloc container — enfants rendus récursivement (pile ou grille).
"""
import logging
from typing import Callable

from ..blocks import ContainerBlock
from ..core import config
from ..core.constants import MAX_WIDTH
from .base import RenderContext, sort_blocks
from .utils import TABLE_ATTRS, background_css, padding_css

log = logging.getLogger(__name__)


def grid_cell_width(columns: int, gap: int, available: int = MAX_WIDTH) -> int:
    """floor((largeur - (n-1)·gap) / n)"""
    return (available - (columns - 1) * gap) // columns


def _frame_style(s) -> str:
    style = f"padding: {padding_css(s.padding)};{background_css(s.background_color)}"
    if s.border_width and s.border_color:
        style += f" border: {s.border_width}px solid {s.border_color};"
    if s.border_radius:
        style += f" border-radius: {s.border_radius};"
    return style


def render_container_block(b: ContainerBlock, ctx: RenderContext, render_child: Callable) -> str:
    if ctx.depth >= config.MAX_NESTING_DEPTH:
        log.warning("container %s ignoré : profondeur %d ≥ %d", b.id, ctx.depth, config.MAX_NESTING_DEPTH)
        return ""

    s = b.settings
    child_ctx = ctx.child()
    children = [render_child(child, child_ctx) for child in sort_blocks(b.content.children)]

    if s.layout == "grid":
        n = s.grid_columns
        cell_px = grid_cell_width(n, s.gap)
        rows = []
        for start in range(0, len(children), n):
            row = children[start:start + n]
            cells = []
            for idx, html in enumerate(row):
                gap = f" padding-right: {s.gap}px;" if idx < len(row) - 1 else ""
                cells.append(
                    f'<td width="{cell_px}" valign="top" style="width: {cell_px}px; max-width: {cell_px}px;{gap}">{html}</td>'
                )
            rows.append(f"<tr>{''.join(cells)}</tr>")
        body = "\n".join(rows)
    else:
        rows = []
        for idx, html in enumerate(children):
            gap = f' style="padding-bottom: {s.gap}px;"' if idx < len(children) - 1 else ""
            rows.append(f"<tr><td{gap}>{html}</td></tr>")
        body = "\n".join(rows)

    return f"""
<table {TABLE_ATTRS}>
  <tr>
    <td style="{_frame_style(s)}">
      <table {TABLE_ATTRS} style="table-layout: fixed;">
        {body}
      </table>
    </td>
  </tr>
</table>"""
