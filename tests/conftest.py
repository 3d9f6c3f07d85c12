"""
Pytest configuration and fixtures.
"""

import json

import pytest
from requests.structures import CaseInsensitiveDict


def wire_entry(**overrides):
    entry = {
        'id': '101',
        'duration': '3600',
        'user_id': '7',
        'user_name': 'Jane Doe',
        'task_id': '55',
        'last_modify': '2020-01-15 17:02:11',
        'date': '2020-01-15',
        'start_time': '09:00:00',
        'end_time': '10:00:00',
        'name': 'Development',
        'description': 'API client',
        'billable': '1',
        'addons_external_id': '0',
        'invoiceId': '0',
        'color': '#4CAF50',
    }
    entry.update(overrides)
    return entry


class FakeResponse:

    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Stands in for requests.Session; remembers every requested url."""

    def __init__(self, response=None, token='secret-token'):
        self.headers = CaseInsensitiveDict()
        if token is not None:
            self.headers['Authorization'] = token
        self.response = response or FakeResponse(payload=[])
        self.requested = []

    def get(self, url, timeout=None):
        self.requested.append(url)
        return self.response


@pytest.fixture
def entry_payload():
    return [
        wire_entry(),
        wire_entry(id='102', billable='0', description='Standup', name='Meetings', task_id='56',
                   start_time='10:00:00', end_time='10:15:00', duration='900', date='2020-01-16'),
        wire_entry(id='103', billable='1', description='Code review', date='2020-01-17', duration='5400',
                   start_time='13:00:00', end_time='14:30:00'),
    ]


@pytest.fixture
def fake_session():
    return FakeSession()
