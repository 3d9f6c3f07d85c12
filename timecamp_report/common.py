import datetime
import functools
import logging

import click
from click.core import ParameterSource
import dateutil.parser

from timecamp_report.timecamp.errors import TimeCampError

logger = logging.getLogger(__name__)


class DateType(click.ParamType):
    """Lenient date parsing: ``2020-01-31``, ``31 Jan 2020``, ``2020-01-31T10:00``..."""

    name = 'date'

    def convert(self, value, param, ctx):
        if isinstance(value, datetime.datetime):
            return value.date()
        if isinstance(value, datetime.date):
            return value
        try:
            return dateutil.parser.parse(value).date()
        except (ValueError, OverflowError):
            self.fail(f'{value!r} is not a valid date', param, ctx)


DATE = DateType()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        level=logging.DEBUG if verbose else logging.WARNING,
    )


def report_errors(command):
    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except TimeCampError as e:
            logger.debug('command failed', exc_info=True)
            click.echo(f'An error occurred - {e}', err=True)
            click.get_current_context().exit(1)
    return wrapper


date_range_options = [
    click.option('--from', '-f', 'from_date', help='Date to get time entries from', required=True, type=DATE),
    click.option('--to', '-t', 'to_date', help='Date to get time entries to', required=True, type=DATE),
]


def with_date_range(command):
    for option in date_range_options:
        command = option(command)
    return command


def from_config_unless_given(name, value, config_value):
    """Use ``config_value`` when the option ``name`` was left at its default on the command line."""
    source = click.get_current_context().get_parameter_source(name)
    if source in (None, ParameterSource.DEFAULT):
        return config_value
    return value
