"""
Converters between TimeCamp wire values and python types.

TimeCamp's JSON payloads carry most values as strings: durations are a number of
seconds, booleans are "0"/"1", colours are HTML colour codes. Every field class
here exposes ``decode(wire)`` and ``encode(value)`` and keeps no state, so a
single instance can be shared by all entries.
"""
import datetime
import re
import typing

import webcolors

from .errors import DecodeError


class Color(typing.NamedTuple):
    red: int
    green: int
    blue: int

    @property
    def html(self) -> str:
        return f'#{self.red:02X}{self.green:02X}{self.blue:02X}'


class Field:

    name = 'value'

    def __init__(self, name=None):
        if name:
            self.name = name

    def decode(self, wire):
        raise NotImplementedError

    def encode(self, value):
        raise NotImplementedError

    def fail(self, wire, reason=None):
        return DecodeError(self.name, wire, reason)


class DurationField(Field):
    """Whole seconds carried as a string, e.g. ``"3600"``."""

    _pattern = re.compile(r'[+-]?\d+')

    def decode(self, wire) -> datetime.timedelta:
        if isinstance(wire, bool):
            raise self.fail(wire, 'not a number of seconds')
        if isinstance(wire, int):
            seconds = wire
        elif isinstance(wire, str) and self._pattern.fullmatch(wire.strip()):
            seconds = int(wire)
        else:
            raise self.fail(wire, 'not a number of seconds')
        try:
            return datetime.timedelta(seconds=seconds)
        except OverflowError as e:
            raise self.fail(wire, 'duration out of range') from e

    def encode(self, value: datetime.timedelta) -> str:
        return str(int(value.total_seconds()))


class DateTimeField(Field):

    def __init__(self, name=None, layout='%Y-%m-%d %H:%M:%S'):
        super().__init__(name)
        self._layout = layout

    def parse(self, wire) -> datetime.datetime:
        if not isinstance(wire, str):
            raise self.fail(wire, f'expected text in {self._layout} format')
        try:
            return datetime.datetime.strptime(wire, self._layout)
        except ValueError as e:
            raise self.fail(wire, str(e)) from e

    def decode(self, wire) -> datetime.datetime:
        return self.parse(wire)

    def encode(self, value) -> str:
        return value.strftime(self._layout)


class DateField(DateTimeField):

    def __init__(self, name=None, layout='%Y-%m-%d'):
        super().__init__(name, layout)

    def decode(self, wire) -> datetime.date:
        return self.parse(wire).date()


class TimeField(DateTimeField):

    def __init__(self, name=None, layout='%H:%M:%S'):
        super().__init__(name, layout)

    def decode(self, wire) -> datetime.time:
        return self.parse(wire).time()


class ZeroOrOtherField(Field):
    """
    ``0`` (number or string) means False, anything else means True.

    Encoding is lossy: True always becomes ``"1"``.
    """

    def decode(self, wire) -> bool:
        if isinstance(wire, str):
            wire = wire.strip()
        return wire not in ('0', 0)

    def encode(self, value: bool) -> str:
        return '1' if value else '0'


class HtmlColorField(Field):
    """``#RRGGBB``, ``#RGB`` or any CSS3 colour name (case-insensitive)."""

    def decode(self, wire) -> typing.Optional[Color]:
        if wire is None or wire == '':
            return None
        if not isinstance(wire, str):
            raise self.fail(wire, 'expected an HTML colour code')
        text = wire.strip()
        try:
            rgb = webcolors.hex_to_rgb(text) if text.startswith('#') else webcolors.name_to_rgb(text)
        except ValueError as e:
            raise self.fail(wire, 'expected #RRGGBB or a colour name') from e
        return Color(rgb.red, rgb.green, rgb.blue)

    def encode(self, value: typing.Optional[Color]) -> str:
        return value.html if value is not None else ''
