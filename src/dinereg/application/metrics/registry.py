from __future__ import annotations

from prometheus_client import Counter

from dinereg.domain.table.entities import TableStatus

RESTAURANTS_CREATED_TOTAL = Counter(
    "dinereg_restaurants_created_total",
    "Total number of restaurants onboarded.",
)

RESTAURANTS_DELETED_TOTAL = Counter(
    "dinereg_restaurants_deleted_total",
    "Total number of restaurants deleted.",
)

TABLES_CREATED_TOTAL = Counter(
    "dinereg_tables_created_total",
    "Total number of tables created.",
    ["restaurant_id"],
)

TABLES_DELETED_TOTAL = Counter(
    "dinereg_tables_deleted_total",
    "Total number of tables deleted, directly or through a restaurant cascade.",
    ["reason"],
)

TABLE_STATUS_TRANSITION_TOTAL = Counter(
    "dinereg_table_status_transition_total",
    "Total number of table occupancy transitions.",
    ["from", "to"],
)

REGISTRY_CONFLICTS_TOTAL = Counter(
    "dinereg_registry_conflicts_total",
    "Total number of uniqueness conflicts rejected by the registry.",
    ["kind"],
)

TABLES_LIST_REQUESTS_TOTAL = Counter(
    "dinereg_tables_list_requests_total",
    "Total number of table list requests.",
    ["restaurant_id", "status"],
)


def record_restaurant_created() -> None:
    RESTAURANTS_CREATED_TOTAL.inc()


def record_restaurant_deleted(tables_deleted: int) -> None:
    RESTAURANTS_DELETED_TOTAL.inc()
    if tables_deleted:
        TABLES_DELETED_TOTAL.labels(reason="cascade").inc(tables_deleted)


def record_table_created(restaurant_id: str) -> None:
    TABLES_CREATED_TOTAL.labels(restaurant_id=restaurant_id).inc()


def record_table_deleted() -> None:
    TABLES_DELETED_TOTAL.labels(reason="direct").inc()


def record_status_transition(from_status: TableStatus, to_status: TableStatus) -> None:
    TABLE_STATUS_TRANSITION_TOTAL.labels(**{"from": from_status.value, "to": to_status.value}).inc()


def record_conflict(kind: str) -> None:
    REGISTRY_CONFLICTS_TOTAL.labels(kind=kind).inc()


def record_tables_list_request(restaurant_id: str, status: str) -> None:
    TABLES_LIST_REQUESTS_TOTAL.labels(restaurant_id=restaurant_id, status=status).inc()
