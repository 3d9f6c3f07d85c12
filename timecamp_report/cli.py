import os

import click
from yaml import load
try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader

from timecamp_report.common import configure_logging
from timecamp_report.context import ReportContext
from timecamp_report.timecamp.commands import commands


@click.group(context_settings={'auto_envvar_prefix': 'TIMECAMP_REPORT'})
@click.option('--config', default='config.yaml', type=click.Path(dir_okay=False))
@click.option('--token', help='TimeCamp API token', envvar='TIMECAMP_TOKEN', required=False)
@click.option('--base-url', help='TimeCamp API base URL', required=False)
@click.option('--verbose', '-v', is_flag=True, default=False)
@click.pass_context
def entry_point(ctx, config, token, base_url, verbose):
    configure_logging(verbose)
    settings = {}
    if os.path.exists(config):
        with open(config, 'r') as f:
            settings = load(f.read(), Loader=Loader) or {}
        ctx.default_map = settings
    ctx.obj = ReportContext(settings, token=token, base_url=base_url)


for command in commands:
    entry_point.add_command(command)


if __name__ == '__main__':
    entry_point()
