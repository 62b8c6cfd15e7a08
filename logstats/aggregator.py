"""Aggregations over a LogCollection: longest transaction, most-failing operation.

Both functions are read-only over the collection. Grouping preserves the
order in which each key first appears, so when two groups tie the one seen
first in the input wins.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

from logstats.models import LogCollection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransactionSpan:
    transaction_id: str = ""
    duration: timedelta = timedelta(0)


@dataclass(frozen=True)
class OperationErrors:
    operation: str = ""
    count: int = 0


def transaction_span(records: LogCollection) -> timedelta:
    """Elapsed time between the earliest and latest record of a group."""
    if len(records) < 2:
        return timedelta(0)
    ordered = records.sorted_by_timestamp()
    return ordered[-1].timestamp - ordered[0].timestamp


def longest_transaction(logs: LogCollection) -> TransactionSpan:
    """Return the transaction with the strictly longest span.

    An empty collection, or one where every transaction has a zero span,
    yields an empty id and a zero duration.
    """
    longest = TransactionSpan()
    for transaction_id, records in logs.group_by(lambda r: r.transaction_id).items():
        span = transaction_span(records)
        if span > longest.duration:
            longest = TransactionSpan(transaction_id, span)

    logger.debug("Longest transaction: %r (%s)", longest.transaction_id, longest.duration)
    return longest


def operation_with_most_errors(logs: LogCollection) -> OperationErrors:
    """Return the operation with the strictly highest ERROR count.

    With no error records at all the result is an empty name and zero.
    """
    most = OperationErrors()
    for operation, records in logs.group_by(lambda r: r.operation).items():
        errors = sum(1 for r in records if r.is_error())
        if errors > most.count:
            most = OperationErrors(operation, errors)

    logger.debug("Operation with most errors: %r (%d)", most.operation, most.count)
    return most
