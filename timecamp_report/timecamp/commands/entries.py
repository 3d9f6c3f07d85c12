import click

from timecamp_report.common import report_errors, with_date_range
from timecamp_report.context import ReportContext, pass_report
from timecamp_report.timecamp.writers import render_listing


@click.option('--task-id', 'task_ids', help='Only entries of this task (repeatable)', multiple=True)
@click.option('--user-id', 'user_ids', help='Only entries of this user (repeatable)', multiple=True)
@with_date_range
@click.command()
@pass_report
@report_errors
def entries(report: ReportContext, from_date, to_date, task_ids, user_ids):
    """Print the time entries logged between two dates."""
    time_entries = report.api.fetch_entries(from_date, to_date,
                                            task_ids=list(task_ids) or None,
                                            user_ids=list(user_ids) or None)
    for line in render_listing(time_entries):
        click.echo(line)
