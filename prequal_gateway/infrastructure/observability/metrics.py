"""Prometheus metrics for monitoring eligibility outcomes, eligible amounts, and EMI usage"""

from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "prequal_decision_total",
    "Total eligibility decisions made",
    ["loan_type", "outcome"],  # eligible | ineligible
)

approval_tier_counter = Counter(
    "prequal_approval_tier_total",
    "Eligibility decisions by approval tier",
    ["tier"],
)

max_amount_bucket_counter = Counter(
    "prequal_max_amount_bucket",
    "Maximum eligible amounts issued by bucket",
    ["bucket"],  # 0, <=5L, 5L-25L, 25L+
)

invalid_input_counter = Counter(
    "prequal_invalid_input_total",
    "Requests rejected by the core as invalid input",
    ["operation"],
)

# EMI metrics
emi_calculation_counter = Counter(
    "prequal_emi_calculation_total",
    "EMI calculations performed",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(loan_type: str, eligible: bool, tier: str, max_eligible_amount: int) -> None:
    """Record decision metrics for monitoring approval rates and amount distribution"""
    outcome = "eligible" if eligible else "ineligible"
    decision_counter.labels(loan_type=loan_type, outcome=outcome).inc()
    approval_tier_counter.labels(tier=tier).inc()

    # Bucket eligible amounts for distribution analysis
    if max_eligible_amount == 0:
        bucket = "0"
    elif max_eligible_amount <= 500_000:
        bucket = "<=5L"
    elif max_eligible_amount <= 2_500_000:
        bucket = "5L-25L"
    else:
        bucket = "25L+"

    max_amount_bucket_counter.labels(bucket=bucket).inc()
