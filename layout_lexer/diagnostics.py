"""Write record dumps to a text sink or through ``logging``."""

import logging
import sys

from .printer import RecordPrinter

logger = logging.getLogger(__name__)

printer = RecordPrinter()


def dump_record(record, file=None):
    """Write the diagnostic dump of *record* to *file* (default stdout)."""
    out = sys.stdout if file is None else file
    out.write(printer.emit(record) + '\n')


def dump_records(records, file=None):
    for record in records:
        dump_record(record, file=file)


def log_record(record, log=None, level=logging.DEBUG):
    """Send the dump of *record* to *log* one line per message.

    Nothing is rendered when *level* is disabled on the target logger.
    """
    log = logger if log is None else log
    if not log.isEnabledFor(level):
        return
    for line in printer.emit(record).splitlines():
        log.log(level, line)
