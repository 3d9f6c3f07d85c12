import datetime
import typing
from dataclasses import dataclass, field

from .errors import DecodeError
from .fields import (Color, DateField, DateTimeField, DurationField, HtmlColorField, TimeField,
                     ZeroOrOtherField)


_duration = DurationField('duration')
_last_modify = DateTimeField('last_modify')
_date = DateField('date')
_start_time = TimeField('start_time')
_end_time = TimeField('end_time')
_billable = ZeroOrOtherField('billable')
_color = HtmlColorField('color')


@dataclass(frozen=True)
class TimeEntry:
    """
    A single TimeCamp time entry.

    Entries are identified by ``id`` alone: two entries with the same id are
    equal (and hash the same) even if the rest of their content differs.
    ``entry_date``, ``start_time`` and ``end_time`` default to their max value
    so an entry that was never populated can be told apart from midnight.
    """
    id: str
    duration: datetime.timedelta = field(default=datetime.timedelta(0), compare=False)
    user_id: str = field(default='', compare=False)
    user_name: str = field(default='', compare=False)
    task_id: str = field(default='', compare=False)
    task_name: str = field(default='', compare=False)
    last_modified: datetime.datetime = field(default=datetime.datetime.min, compare=False)
    entry_date: datetime.date = field(default=datetime.date.max, compare=False)
    start_time: datetime.time = field(default=datetime.time.max, compare=False)
    end_time: datetime.time = field(default=datetime.time.max, compare=False)
    description: str = field(default='', compare=False)
    billable: bool = field(default=False, compare=False)
    addons_external_id: str = field(default='', compare=False)
    invoice_id: str = field(default='', compare=False)
    color: typing.Optional[Color] = field(default=None, compare=False)

    @property
    def billable_label(self) -> str:
        return 'Billable' if self.billable else 'Non-Billable'

    @property
    def hours(self) -> float:
        return self.duration.total_seconds() / 3600

    @classmethod
    def from_json(cls, obj: typing.Mapping):
        if not isinstance(obj, dict):
            raise DecodeError('entry', obj, 'expected a JSON object')
        values = {
            'id': _text(obj.get('id')),
            'user_id': _text(obj.get('user_id')),
            'user_name': _text(obj.get('user_name')),
            'task_id': _text(obj.get('task_id')),
            'task_name': _text(obj.get('name')),
            'description': _text(obj.get('description')),
            'addons_external_id': _text(obj.get('addons_external_id')),
            'invoice_id': _text(obj.get('invoiceId')),
        }
        if obj.get('duration') is not None:
            values['duration'] = _duration.decode(obj['duration'])
        if obj.get('last_modify') is not None:
            values['last_modified'] = _last_modify.decode(obj['last_modify'])
        if obj.get('date') is not None:
            values['entry_date'] = _date.decode(obj['date'])
        if obj.get('start_time') is not None:
            values['start_time'] = _start_time.decode(obj['start_time'])
        if obj.get('end_time') is not None:
            values['end_time'] = _end_time.decode(obj['end_time'])
        if obj.get('billable') is not None:
            values['billable'] = _billable.decode(obj['billable'])
        values['color'] = _color.decode(obj.get('color'))
        return cls(**values)

    @classmethod
    def from_json_list(cls, payload) -> typing.List['TimeEntry']:
        if not isinstance(payload, list):
            raise DecodeError('entries', payload, 'expected a JSON array')
        return [cls.from_json(obj) for obj in payload]

    def to_json(self) -> dict:
        return {
            'id': self.id,
            'duration': _duration.encode(self.duration),
            'user_id': self.user_id,
            'user_name': self.user_name,
            'task_id': self.task_id,
            'last_modify': _last_modify.encode(self.last_modified),
            'date': _date.encode(self.entry_date),
            'start_time': _start_time.encode(self.start_time),
            'end_time': _end_time.encode(self.end_time),
            'name': self.task_name,
            'description': self.description,
            'billable': _billable.encode(self.billable),
            'addons_external_id': self.addons_external_id,
            'invoiceId': self.invoice_id,
            'color': _color.encode(self.color),
        }


def _text(value) -> str:
    return '' if value is None else str(value)


def same_entry(first: TimeEntry, second: TimeEntry) -> bool:
    return first.id == second.id


def unique_entries(entries: typing.Iterable[TimeEntry]) -> typing.List[TimeEntry]:
    """Drop entries whose id was already seen, keeping the first occurrence."""
    seen = set()
    result = []
    for entry in entries:
        if entry.id not in seen:
            seen.add(entry.id)
            result.append(entry)
    return result
