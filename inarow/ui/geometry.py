"""
pixel <-> cell math for the board widget, kept free of qt so it can be tested
"""
from collections import namedtuple

BoardRect = namedtuple("BoardRect", "x y width height cell")

X_INSET_RATIO = 10      # X strokes inset by cell / 10
O_RADIUS_RATIO = 2.5    # O radius is cell / 2.5


def board_rect(area_w, area_h, cols, rows):
    """
    largest grid of square cells that fits the area, centered
    """
    cell = min(area_w / cols, area_h / rows)
    w, h = cell * cols, cell * rows
    return BoardRect((area_w - w) / 2, (area_h - h) / 2, w, h, cell)


def cell_at(x, y, rect, cols, rows):
    """
    (col, row) under pixel (x, y), or None outside the grid
    """
    if rect.cell <= 0:
        return None
    if not (rect.x <= x < rect.x + rect.width and rect.y <= y < rect.y + rect.height):
        return None
    col = int((x - rect.x) // rect.cell)
    row = int((y - rect.y) // rect.cell)
    # float edge cases right on the far border
    return min(col, cols - 1), min(row, rows - 1)


def cell_origin(col, row, rect):
    return rect.x + col * rect.cell, rect.y + row * rect.cell


def cell_center(col, row, rect):
    x, y = cell_origin(col, row, rect)
    return x + rect.cell / 2, y + rect.cell / 2


def grid_lines(rect, cols, rows):
    """
    inner grid line segments as ((x1, y1), (x2, y2))
    """
    lines = []
    for c in range(1, cols):
        x = rect.x + c * rect.cell
        lines.append(((x, rect.y), (x, rect.y + rect.height)))
    for r in range(1, rows):
        y = rect.y + r * rect.cell
        lines.append(((rect.x, y), (rect.x + rect.width, y)))
    return lines


def x_strokes(col, row, rect):
    """two crossing strokes of an X, inset from the cell edges"""
    x, y = cell_origin(col, row, rect)
    off = rect.cell / X_INSET_RATIO
    far = rect.cell - off
    return (((x + off, y + off), (x + far, y + far)),
            ((x + off, y + far), (x + far, y + off)))


def o_circle(col, row, rect):
    """center and radius of an O"""
    return cell_center(col, row, rect), rect.cell / O_RADIUS_RATIO
