"""Prometheus metrics for the notes engine.

All metric objects are defined here so they can be imported from any module.
"""

from prometheus_client import Counter, Gauge

# ---------------------------------------------------------------------------
# Note lifecycle metrics
# ---------------------------------------------------------------------------

NOTES_COMMITTED = Counter(
    "smart_notes_committed_total",
    "Total number of notes committed from a draft",
    ["color"],
)

NOTES_DELETED = Counter(
    "smart_notes_deleted_total",
    "Total number of notes deleted",
)

STORED_NOTES = Gauge(
    "smart_notes_stored",
    "Number of notes currently held in memory",
)

# ---------------------------------------------------------------------------
# Query metrics
# ---------------------------------------------------------------------------

FILTER_EVALUATIONS = Counter(
    "smart_notes_filter_evaluations_total",
    "Total number of filter evaluations over the note collection",
)

# ---------------------------------------------------------------------------
# Persistence metrics
# ---------------------------------------------------------------------------

PERSISTENCE_FAILURES = Counter(
    "smart_notes_persistence_failures_total",
    "Total failed load or save attempts",
    ["operation"],  # load, save
)
