from carbon_aegis.services.aggregators.emission_aggregator import (
    EmissionAggregator,
    aggregate_by_category,
    aggregate_by_month,
    aggregate_by_scope,
    largest_source,
    summarize,
    top_areas,
)

__all__ = [
    "EmissionAggregator",
    "aggregate_by_category",
    "aggregate_by_month",
    "aggregate_by_scope",
    "largest_source",
    "summarize",
    "top_areas",
]
