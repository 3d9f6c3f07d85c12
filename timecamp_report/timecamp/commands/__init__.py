from .entries import entries
from .export import csv_export, xlsx_export

commands = [entries, csv_export, xlsx_export]
