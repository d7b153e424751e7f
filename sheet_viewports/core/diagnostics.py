# sheet_viewports/core/diagnostics.py

def _exc_to_str(e):
    try:
        return str(e)
    except Exception:
        return "<unstringifiable exception>"


class Diagnostics(object):
    """
    Structured diagnostics recorder for sheet/viewport processing.

    - Bounded event storage
    - Aggregated counts (keep counting after the event cap is hit)
    - JSON-safe output

    Events carry the ids of the sheet, view and viewport involved so a
    report can point back at the offending elements.
    """

    def __init__(self, max_events=200):
        self.max_events = int(max_events)

        self.events = []
        self.counts = {}
        self.dropped_events = 0

        # dedupe_key -> {index: int|None, suppressed: int}
        self._dedupe = {}

    def _count_key(self, level, phase, callsite, exc_type):
        return "{}|{}|{}|{}".format(level, phase, callsite, exc_type or "")

    def _payload(self, level, phase, callsite, message, exc=None,
                 sheet_id=None, view_id=None, viewport_id=None, extra=None):
        return {
            "level": level,
            "phase": phase,
            "callsite": callsite,
            "message": message,
            "exc_type": type(exc).__name__ if exc is not None else None,
            "exc_message": _exc_to_str(exc) if exc is not None else None,
            "sheet_id": sheet_id,
            "view_id": view_id,
            "viewport_id": viewport_id,
            "extra": extra or {},
        }

    def _record(self, payload):
        key = self._count_key(
            payload.get("level"),
            payload.get("phase"),
            payload.get("callsite"),
            payload.get("exc_type"),
        )
        self.counts[key] = self.counts.get(key, 0) + 1

        if len(self.events) >= self.max_events:
            self.dropped_events += 1
            return None

        self.events.append(payload)
        return len(self.events) - 1

    def debug(self, phase, callsite, message, sheet_id=None, view_id=None,
              viewport_id=None, extra=None):
        self._record(self._payload(
            "DEBUG", phase, callsite, message,
            sheet_id=sheet_id, view_id=view_id, viewport_id=viewport_id, extra=extra,
        ))

    def info(self, phase, callsite, message, sheet_id=None, view_id=None,
             viewport_id=None, extra=None):
        self._record(self._payload(
            "INFO", phase, callsite, message,
            sheet_id=sheet_id, view_id=view_id, viewport_id=viewport_id, extra=extra,
        ))

    def warn(self, phase, callsite, message, sheet_id=None, view_id=None,
             viewport_id=None, extra=None):
        self._record(self._payload(
            "WARN", phase, callsite, message,
            sheet_id=sheet_id, view_id=view_id, viewport_id=viewport_id, extra=extra,
        ))

    def error(self, phase, callsite, message, exc=None, sheet_id=None,
              view_id=None, viewport_id=None, extra=None):
        self._record(self._payload(
            "ERROR", phase, callsite, message, exc=exc,
            sheet_id=sheet_id, view_id=view_id, viewport_id=viewport_id, extra=extra,
        ))

    def debug_dedupe(self, dedupe_key, phase, callsite, message, sheet_id=None,
                     view_id=None, viewport_id=None, extra=None):
        """Record at most one DEBUG event per dedupe_key.

        The first call records the event with extra.suppressed_count=0; later
        calls only bump suppressed_count on that stored event.
        """
        entry = self._dedupe.get(dedupe_key)
        if entry is None:
            payload_extra = dict(extra or {})
            payload_extra.setdefault("suppressed_count", 0)
            idx = self._record(self._payload(
                "DEBUG", phase, callsite, message,
                sheet_id=sheet_id, view_id=view_id, viewport_id=viewport_id,
                extra=payload_extra,
            ))
            self._dedupe[dedupe_key] = {"index": idx, "suppressed": 0}
            return

        entry["suppressed"] += 1
        idx = entry.get("index")
        if idx is not None and 0 <= idx < len(self.events):
            ev_extra = self.events[idx].get("extra")
            if isinstance(ev_extra, dict):
                ev_extra["suppressed_count"] = entry["suppressed"]

    def num_level(self, level):
        """Total number of events recorded at level, including dropped ones."""
        prefix = "{}|".format(level)
        return sum(n for k, n in self.counts.items() if k.startswith(prefix))

    def to_dict(self):
        return {
            "max_events": self.max_events,
            "num_events": len(self.events),
            "dropped_events": self.dropped_events,
            "counts": dict(self.counts),
            "events": list(self.events),
        }
