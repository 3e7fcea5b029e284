from decimal import Decimal

# Metrics table layout, one row per published index value.
# MetricTypeID matches IndexKind (1 = CDI, 2 = SELIC).
_LAST_METRIC_QUERY = """
    SELECT TOP 1 Value, ReferenceDate
    FROM Metrics
    WHERE MetricTypeID = ?
    ORDER BY ReferenceDate DESC, MetricID DESC
"""


def get_last_metric_value(conn, metric_type_id: int) -> Decimal | None:
    """Return the most recent stored value for a metric type, or None."""
    cursor = conn.cursor()
    cursor.execute(_LAST_METRIC_QUERY, metric_type_id)
    row = cursor.fetchone()
    if row is None or row.Value is None:
        return None
    # Keep the stored percentage exact; drivers may hand back float for DECIMAL.
    return row.Value if isinstance(row.Value, Decimal) else Decimal(str(row.Value))
