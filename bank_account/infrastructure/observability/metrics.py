"""Prometheus metrics for account operations, balances, and HTTP latency"""

from prometheus_client import Counter, Histogram, Gauge

from bank_account.domain.models import Transition

# Operation metrics
operation_counter = Counter(
    "bank_account_operations_total",
    "Account operations dispatched",
    ["operation", "outcome"],  # applied | rejected
)

notice_counter = Counter(
    "bank_account_notices_total",
    "Advisory notices raised for rejected operations",
    ["operation"],
)

discarded_input_counter = Counter(
    "bank_account_discarded_inputs_total",
    "Non-numeric pending amount inputs discarded",
    ["field"],
)

# Account state
balance_gauge = Gauge(
    "bank_account_balance",
    "Current account balance",
)

loan_gauge = Gauge(
    "bank_account_loan_outstanding",
    "Current outstanding loan",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_transition(operation: str, result: Transition) -> None:
    """Record operation outcome and the resulting balance and loan"""
    outcome = "applied" if result.changed else "rejected"
    operation_counter.labels(operation=operation, outcome=outcome).inc()

    if result.notice is not None:
        notice_counter.labels(operation=operation).inc()

    balance_gauge.set(result.state.balance)
    loan_gauge.set(result.state.loan_outstanding)


def record_discarded_input(field: str) -> None:
    """Count pending-amount input that was discarded instead of dispatched"""
    discarded_input_counter.labels(field=field).inc()
