"""
Report output for sheet/viewport listing.

The listing command writes one line per sheet and one per placed view. Inside
Dynamo there is no debug console to send them to, so they are kept here as
records and handed back through the node's OUT: timestamped for the run log,
bare for the report text.
"""

import datetime

LEVELS = ("INFO", "WARN", "ERROR")


class Logger(object):
    """Collects (time, level, message) records; optionally echoes them.

    Attributes:
        enabled: Print each line as it is written
        records: list of (HH:MM:SS, level, message)
    """

    def __init__(self, enabled=True):
        self.enabled = enabled
        self.records = []

    def log(self, level, msg):
        if level not in LEVELS:
            raise ValueError("Unknown log level: {}".format(level))
        rec = (datetime.datetime.now().strftime("%H:%M:%S"), level, str(msg))
        self.records.append(rec)
        if self.enabled:
            print(self._format(rec))

    def info(self, msg):
        self.log("INFO", msg)

    def warn(self, msg):
        self.log("WARN", msg)

    def error(self, msg):
        self.log("ERROR", msg)

    @staticmethod
    def _format(rec):
        return "[{0}] {1}: {2}".format(*rec)

    @property
    def lines(self):
        return [self._format(r) for r in self.records]

    def dump(self):
        """Timestamped lines, "[HH:MM:SS] LEVEL: message"."""
        return self.lines

    def messages(self, level=None):
        """Bare message text, optionally only one level."""
        return [msg for _, lvl, msg in self.records if level is None or lvl == level]

    def report(self):
        """INFO messages joined as the plain-text listing report."""
        return "\n".join(self.messages("INFO"))

    def num(self, level):
        return sum(1 for _, lvl, _ in self.records if lvl == level)
