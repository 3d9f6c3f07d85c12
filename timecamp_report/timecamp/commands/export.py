import click

from timecamp_report.common import from_config_unless_given, report_errors, with_date_range
from timecamp_report.context import ReportContext, pass_report
from timecamp_report.timecamp.writers import CSV_LAYOUTS, XlsxTimeEntriesWriter, render_csv


def only_billable_option(command):
    return click.option('--only-billable/--all-entries', '-b/-a',
                        help='Skip non-billable entries (defaults to only_billable from the config file)',
                        default=False)(command)


@only_billable_option
@click.option('--layout', '-l', help='CSV columns layout (defaults to csv_layout from the config file)',
              type=click.Choice(sorted(CSV_LAYOUTS)), required=False)
@click.option('--output', '-o', help='CSV output path', default='-',
              type=click.Path(dir_okay=False, writable=True, allow_dash=True))
@with_date_range
@click.command('csv')
@pass_report
@report_errors
def csv_export(report: ReportContext, from_date, to_date, only_billable, layout, output):
    """Export time entries as CSV for payroll import."""
    only_billable = from_config_unless_given('only_billable', only_billable, report.only_billable)
    time_entries = report.api.fetch_entries(from_date, to_date)
    document = render_csv(time_entries, only_billable=only_billable,
                          layout=CSV_LAYOUTS[layout] if layout else report.csv_layout)
    with click.open_file(output, 'w', encoding='utf-8') as f:
        f.write(document)
    if output != '-':
        click.echo(f'exported {len(time_entries)} entries to {output}')


@only_billable_option
@click.option('--output', '-o', help='Excel output path', default='time-entries.xlsx',
              type=click.Path(dir_okay=False, writable=True))
@with_date_range
@click.command('xlsx')
@pass_report
@report_errors
def xlsx_export(report: ReportContext, from_date, to_date, only_billable, output):
    """Export time entries as an Excel sheet."""
    only_billable = from_config_unless_given('only_billable', only_billable, report.only_billable)
    time_entries = report.api.fetch_entries(from_date, to_date)
    with XlsxTimeEntriesWriter(output, only_billable=only_billable) as writer:
        for entry in time_entries:
            writer.write(entry)
    click.echo(f'exported {writer.rows_written} entries to {output}')
