import typing

from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.styles.colors import Color


class BaseSheet:
    """Thin wrapper over an openpyxl worksheet with a styled header row and fixed column widths."""

    _title = ''
    _header: typing.Optional[typing.Mapping[str, str]] = None
    _header_font = Font(color='FF000000', bold=True)
    _header_fill = PatternFill('solid', fgColor=Color(indexed=22))
    _columns_width: typing.Optional[typing.Mapping[str, int]] = None
    _wrap = False

    def __init__(self, sheet, title=None, wrap=None):
        self._sheet = sheet
        sheet.title = title or self._title
        for cell, cell_title in (self._header or {}).items():
            self.set_value(cell, cell_title, font=self._header_font, fill=self._header_fill, wrap=False)
        for column, width in (self._columns_width or {}).items():
            sheet.column_dimensions[column].width = width
        if wrap is not None:
            self._wrap = wrap
        sheet.freeze_panes = 'A2'

    @property
    def sheet(self):
        return self._sheet

    def set_value(self, cell, value, font=None, fill=None, wrap=None):
        self._sheet[cell] = value
        if font:
            self._sheet[cell].font = font
        if fill:
            self._sheet[cell].fill = fill
        if self._wrap if wrap is None else wrap:
            self._sheet[cell].alignment = Alignment(wrap_text=True, vertical='top')

    def __setitem__(self, key, value):
        self.set_value(key, value)

    def __getitem__(self, item):
        return self._sheet[item]
