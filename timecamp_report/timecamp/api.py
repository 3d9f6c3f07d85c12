import datetime
import logging
import typing

import requests

from .errors import AuthenticationError, DecodeError, FilterNotSupportedError, InvalidRangeError, ServiceError
from .model import TimeEntry

logger = logging.getLogger(__name__)

BASE_URL = 'https://www.timecamp.com/third_party/api'
DATE_FORMAT = '%Y-%m-%d'
USER_AGENT = 'timecamp-report time entries exporter'


class TimeCampAPI:

    def __init__(self, session: requests.Session, base_url=BASE_URL, strict_filters=False, timeout=None):
        self.session = session
        self.base_url = base_url.rstrip('/')
        self.strict_filters = strict_filters
        self.timeout = timeout

    @classmethod
    def with_token(cls, token, **kwargs):
        session = requests.Session()
        if token:
            session.headers['Authorization'] = token
        session.headers['User-Agent'] = USER_AGENT
        return cls(session, **kwargs)

    def check_token(self):
        if not self.session.headers.get('Authorization', '').strip():
            logger.error('TimeCamp token is missing')
            raise AuthenticationError('TimeCamp token is missing.')

    def entries_url(self, from_date: datetime.date, to_date: datetime.date,
                    task_ids: typing.Sequence[str] = None, user_ids: typing.Sequence[str] = None) -> str:
        if to_date < from_date:
            logger.error('invalid range: %s - %s', from_date, to_date)
            raise InvalidRangeError(from_date, to_date)
        if self.strict_filters and (task_ids is not None or user_ids is not None):
            logger.error('task or user filters passed while strict filters are on')
            raise FilterNotSupportedError('filtering by task or user ids is disabled')

        url = (f'{self.base_url}/entries/format/json'
               f'/from/{from_date.strftime(DATE_FORMAT)}'
               f'/to/{to_date.strftime(DATE_FORMAT)}')
        if task_ids:
            url += f'/task_ids/{",".join(str(task_id) for task_id in task_ids)}'
        if user_ids:
            url += f'/user_ids/{",".join(str(user_id) for user_id in user_ids)}'
        return url

    def call_api(self, url):
        logger.debug('uri: %s', url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error('TimeCamp request failed: %s', e)
            raise ServiceError(f'TimeCamp request failed: {e}') from e
        if not 200 <= response.status_code < 300:
            logger.error('TimeCamp responded with %s', response.status_code)
            raise ServiceError(f'TimeCamp responded with HTTP {response.status_code}', response.status_code)
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError('response body', response.text[:200], 'not valid JSON') from e

    def fetch_entries(self, from_date: datetime.date, to_date: datetime.date,
                      task_ids: typing.Sequence[str] = None,
                      user_ids: typing.Sequence[str] = None) -> typing.List[TimeEntry]:
        self.check_token()
        url = self.entries_url(_as_date(from_date), _as_date(to_date), task_ids, user_ids)
        try:
            entries = TimeEntry.from_json_list(self.call_api(url))
        except DecodeError as e:
            logger.error('cannot decode time entries: %s', e)
            raise
        logger.info('fetched %d time entries', len(entries))
        return entries


def _as_date(value) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    return value
