import csv
import datetime
import io
import typing

from openpyxl.styles import PatternFill
from openpyxl.workbook import Workbook

from timecamp_report.model.excel import BaseSheet
from .model import TimeEntry

NOTHING_FOUND = 'Nothing found!'

CSV_HEADER = ['Date', 'Project Name', 'Job Name', 'Work Item', 'From time', 'To time', 'Hours', 'Description',
              ' Mail Id']


def format_duration(duration: datetime.timedelta) -> str:
    seconds = int(duration.total_seconds())
    sign = '-' if seconds < 0 else ''
    hours, rest = divmod(abs(seconds), 3600)
    return f'{sign}{hours:02d}:{rest // 60:02d}:{rest % 60:02d}'


def format_hours(entry: TimeEntry) -> str:
    return f"{float(f'{entry.hours:.2f}'):g}"


def format_listing_line(entry: TimeEntry) -> str:
    return (f'{entry.id} : '
            f'{entry.task_name} ({entry.task_id}) : '
            f'{entry.entry_date.strftime("%A, %B %d, %Y")} : '
            f'{entry.start_time:%H:%M:%S} - {entry.end_time:%H:%M:%S} : '
            f'{format_duration(entry.duration)} : '
            f'{entry.billable_label} : '
            f'{entry.user_name} ({entry.user_id}).')


def render_listing(entries: typing.Iterable[TimeEntry]) -> typing.List[str]:
    lines = [format_listing_line(entry) for entry in entries]
    return lines or [NOTHING_FOUND]


def billable_only(entries: typing.Iterable[TimeEntry]) -> typing.List[TimeEntry]:
    return [entry for entry in entries if entry.billable]


class CsvLayout:
    """
    Header plus the extractors producing one row.

    The header is written as is; every row value is quoted.
    """

    def __init__(self, name, header: typing.List[str], extractors: typing.List[typing.Callable[[TimeEntry], str]]):
        self.name = name
        self.header = header
        self.extractors = extractors

    def header_line(self) -> str:
        return ','.join(self.header)

    def row(self, entry: TimeEntry) -> typing.List[str]:
        return [extract(entry) for extract in self.extractors]


# Rows only fill the first four columns of the header; kept for parity with existing payroll imports.
LEGACY_LAYOUT = CsvLayout('legacy', CSV_HEADER, [
    lambda entry: entry.entry_date.strftime('%d/%m/%Y'),
    lambda entry: '',
    lambda entry: entry.task_name,
    lambda entry: entry.description,
])

FULL_LAYOUT = CsvLayout('full', CSV_HEADER, [
    lambda entry: entry.entry_date.strftime('%d/%m/%Y'),
    lambda entry: '',
    lambda entry: entry.task_name,
    lambda entry: entry.task_id,
    lambda entry: entry.start_time.strftime('%H:%M'),
    lambda entry: entry.end_time.strftime('%H:%M'),
    format_hours,
    lambda entry: entry.description,
    lambda entry: entry.user_name,
])

CSV_LAYOUTS = {layout.name: layout for layout in (LEGACY_LAYOUT, FULL_LAYOUT)}


def render_csv(entries: typing.Iterable[TimeEntry], only_billable=False, layout: CsvLayout = LEGACY_LAYOUT) -> str:
    if only_billable:
        entries = billable_only(entries)
    output = io.StringIO()
    output.write(layout.header_line() + '\n')
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator='\n')
    for entry in entries:
        writer.writerow(layout.row(entry))
    return output.getvalue()


class TimeEntriesSheet(BaseSheet):

    _title = 'Time entries'

    _header = {
        'A1': 'Date',
        'B1': 'Task',
        'C1': 'From',
        'D1': 'To',
        'E1': 'Hours',
        'F1': 'Billable',
        'G1': 'User',
        'H1': 'Description',
    }
    _columns_width = {
        'A': 12,
        'B': 30,
        'C': 10,
        'D': 10,
        'E': 10,
        'F': 12,
        'G': 25,
        'H': 60,
    }
    _wrap = True

    def __init__(self, sheet, **kwargs):
        super().__init__(sheet, **kwargs)
        self._row = 1

    def write(self, entry: TimeEntry):
        self._row += 1
        row = self._row
        self[f'A{row}'] = entry.entry_date
        self[f'A{row}'].number_format = 'DD/MM/YYYY'
        self[f'B{row}'] = entry.task_name
        if entry.color is not None:
            self[f'B{row}'].fill = PatternFill('solid', fgColor=f'FF{entry.color.html[1:]}')
        self[f'C{row}'] = entry.start_time.strftime('%H:%M')
        self[f'D{row}'] = entry.end_time.strftime('%H:%M')
        self[f'E{row}'] = round(entry.hours, 2)
        self[f'F{row}'] = entry.billable_label
        self[f'G{row}'] = entry.user_name
        self[f'H{row}'] = entry.description

    @property
    def rows_written(self) -> int:
        return self._row - 1


class XlsxTimeEntriesWriter:

    def __init__(self, path, only_billable=False):
        self._path = path
        self._only_billable = only_billable

    def __enter__(self):
        self._workbook = Workbook()
        self._sheet = TimeEntriesSheet(self._workbook.active)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self._workbook.save(filename=self._path)

    def write(self, entry: TimeEntry):
        if self._only_billable and not entry.billable:
            return
        self._sheet.write(entry)

    @property
    def rows_written(self) -> int:
        return self._sheet.rows_written
