"""
Row ordering and offsets for the dropdown

Offsets are measured from the widget's top edge with y pointing down,
so a negative offset moves content upward.
"""
import math


def selected_index(options, selection):
    """First position of selection in options, 0 when absent"""
    try:
        return list(options).index(selection)
    except ValueError:
        return 0


def visible_rows(options, selection, dynamic):
    if dynamic:
        return list(options)
    # Selected row pinned first, never duplicated
    return [selection] + [opt for opt in options if opt != selection]


def content_offset(options, selection, dynamic, row_height):
    if not dynamic:
        return 0
    return -selected_index(options, selection) * row_height


def mask_height(options, expanded, row_height):
    if expanded:
        return len(options) * row_height
    return row_height


def mask_offset(options, selection, dynamic, expanded, row_height):
    # Follows the content offset, but only while the whole list is exposed
    if dynamic and expanded:
        return -selected_index(options, selection) * row_height
    return 0


def row_at(offset_from_top, stack_offset, row_count, row_height):
    """Index of the row under a point offset_from_top below the widget's top edge"""
    if row_height <= 0:
        return None
    index = math.floor((offset_from_top - stack_offset) / row_height)
    if 0 <= index < row_count:
        return index
    return None
