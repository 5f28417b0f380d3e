# shiftgrid/render - Markup materialization
from .html import data_attr_name, render_cell, render_html

__all__ = ["render_html", "render_cell", "data_attr_name"]
