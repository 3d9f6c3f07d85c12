import click

from timecamp_report.timecamp.api import BASE_URL, TimeCampAPI
from timecamp_report.timecamp.writers import CSV_LAYOUTS, CsvLayout


class ReportContext:
    """Settings loaded from the YAML config file, plus values given on the command line."""

    def __init__(self, config=None, token=None, base_url=None):
        self._config = config or {}
        self._token = token
        self._base_url = base_url
        self._api = None

    @property
    def token(self) -> str:
        return self._token or self._config.get('token') or ''

    @property
    def base_url(self) -> str:
        return self._base_url or self._config.get('base_url') or BASE_URL

    @property
    def strict_filters(self) -> bool:
        return bool(self._config.get('strict_filters', False))

    @property
    def only_billable(self) -> bool:
        return bool(self._config.get('only_billable', False))

    @property
    def timeout(self):
        return self._config.get('timeout')

    @property
    def csv_layout(self) -> CsvLayout:
        name = self._config.get('csv_layout', 'legacy')
        if name not in CSV_LAYOUTS:
            raise click.BadParameter(f'unknown csv layout {name!r}, expected one of {", ".join(CSV_LAYOUTS)}',
                                     param_hint='csv_layout')
        return CSV_LAYOUTS[name]

    @property
    def api(self) -> TimeCampAPI:
        if self._api is None:
            self._api = TimeCampAPI.with_token(self.token, base_url=self.base_url,
                                               strict_filters=self.strict_filters, timeout=self.timeout)
        return self._api


pass_report = click.make_pass_decorator(ReportContext)
