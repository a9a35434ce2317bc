"""
Dropdown selector package
"""
from dropdown.chevron import ChevronIndicator
from dropdown.model import DropdownModel
from dropdown.selectable_list import DropdownRow, SelectableList

__all__ = [
    'ChevronIndicator',
    'DropdownModel',
    'DropdownRow',
    'SelectableList',
]
