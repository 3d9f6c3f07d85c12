import datetime

import pytest

from timecamp_report.timecamp.errors import DecodeError
from timecamp_report.timecamp.fields import Color
from timecamp_report.timecamp.model import TimeEntry, same_entry, unique_entries

from conftest import wire_entry


def test_from_json_decodes_every_field():
    entry = TimeEntry.from_json(wire_entry())

    assert entry.id == '101'
    assert entry.duration == datetime.timedelta(hours=1)
    assert entry.user_id == '7'
    assert entry.user_name == 'Jane Doe'
    assert entry.task_id == '55'
    assert entry.task_name == 'Development'
    assert entry.last_modified == datetime.datetime(2020, 1, 15, 17, 2, 11)
    assert entry.entry_date == datetime.date(2020, 1, 15)
    assert entry.start_time == datetime.time(9)
    assert entry.end_time == datetime.time(10)
    assert entry.description == 'API client'
    assert entry.billable is True
    assert entry.addons_external_id == '0'
    assert entry.invoice_id == '0'
    assert entry.color == Color(0x4C, 0xAF, 0x50)


def test_numeric_ids_become_strings():
    entry = TimeEntry.from_json(wire_entry(id=101, user_id=7, task_id=55))
    assert (entry.id, entry.user_id, entry.task_id) == ('101', '7', '55')


def test_unpopulated_fields_keep_sentinels():
    entry = TimeEntry.from_json({'id': '1'})

    assert entry.entry_date == datetime.date.max
    assert entry.start_time == datetime.time.max
    assert entry.end_time == datetime.time.max
    assert entry.duration == datetime.timedelta(0)
    assert entry.billable is False
    assert entry.color is None


def test_sentinel_is_distinct_from_midnight():
    entry = TimeEntry.from_json(wire_entry(start_time='00:00:00'))
    assert entry.start_time == datetime.time(0)
    assert entry.start_time != TimeEntry('1').start_time


def test_entries_with_same_id_are_equal():
    first = TimeEntry.from_json(wire_entry(description='first'))
    second = TimeEntry.from_json(wire_entry(description='second', duration='60'))

    assert first == second
    assert hash(first) == hash(second)
    assert same_entry(first, second)


def test_entries_with_different_ids_differ():
    assert TimeEntry.from_json(wire_entry(id='1')) != TimeEntry.from_json(wire_entry(id='2'))


def test_unique_entries_keeps_first_occurrence_in_order():
    entries = [TimeEntry('a', description='1'), TimeEntry('b'), TimeEntry('a', description='2'), TimeEntry('c')]

    result = unique_entries(entries)

    assert [entry.id for entry in result] == ['a', 'b', 'c']
    assert result[0].description == '1'


def test_entries_are_immutable():
    entry = TimeEntry('1')
    with pytest.raises(AttributeError):
        entry.description = 'changed'


def test_billable_label():
    assert TimeEntry('1', billable=True).billable_label == 'Billable'
    assert TimeEntry('1', billable=False).billable_label == 'Non-Billable'


def test_to_json_uses_wire_encodings():
    wire = wire_entry(billable='5')
    encoded = TimeEntry.from_json(wire).to_json()

    assert encoded['duration'] == '3600'
    assert encoded['billable'] == '1'
    assert encoded['color'] == '#4CAF50'
    assert encoded['last_modify'] == wire['last_modify']
    assert encoded['date'] == wire['date']
    assert encoded['name'] == 'Development'
    assert encoded['invoiceId'] == '0'


def test_from_json_list(entry_payload):
    entries = TimeEntry.from_json_list(entry_payload)
    assert [entry.id for entry in entries] == ['101', '102', '103']


def test_empty_list_is_no_entries():
    assert TimeEntry.from_json_list([]) == []


@pytest.mark.parametrize('payload', [{'id': '1'}, 'entries', None, [1, 2]])
def test_from_json_list_rejects_non_arrays(payload):
    with pytest.raises(DecodeError):
        TimeEntry.from_json_list(payload)


def test_one_bad_field_fails_the_whole_batch(entry_payload):
    entry_payload[1]['duration'] = 'soon'
    with pytest.raises(DecodeError) as e:
        TimeEntry.from_json_list(entry_payload)
    assert e.value.field == 'duration'


def test_huge_duration_fails_the_batch_as_decode_error():
    with pytest.raises(DecodeError) as e:
        TimeEntry.from_json_list([wire_entry(duration='99999999999999999999')])
    assert e.value.field == 'duration'


def test_css_colour_names_decode():
    assert TimeEntry.from_json(wire_entry(color='DarkOrange')).color == Color(0xFF, 0x8C, 0x00)
