"""
Run the standard delivery queries over a saved delivery set.

Usage:
    python -m scripts.run_queries --input data/sample --client C001 --city Haifa --type Express
    python -m scripts.run_queries --input data/sample --missing-arrival skip --export reports/
"""

import argparse

from scripts.utils import load_deliveries, setup_logging
from src.business_objects.common import DeliveryType
from src.queries import MissingArrivalPolicy, QueryConfig, QueryHelper, page_count
from src.queries.query_helper import status_then_loading_start_key
from src.reports.export import export_reports


# "first ten" deliveries per city/type
CITY_TYPE_PAGE_SIZE = 10


def main():
    parser = argparse.ArgumentParser(description="Run delivery queries")
    parser.add_argument("--input", default="data/sample", help="Directory holding deliveries.json")
    parser.add_argument("--client", default="C001", help="Client id for the short-info listing")
    parser.add_argument("--city", default="Haifa", help="Origin city for the city/type query")
    parser.add_argument("--type", default=DeliveryType.EXPRESS.value, help="Delivery type for the city/type query")
    parser.add_argument("--page-size", type=int, default=10, help="Page size for the ordered listing")
    parser.add_argument("--page", type=int, default=1, help="Page number for the ordered listing (1-based)")
    parser.add_argument("--missing-arrival", choices=[p.value for p in MissingArrivalPolicy],
                        default=MissingArrivalPolicy.SKIP.value, help="Policy for deliveries without arrival start")
    parser.add_argument("--export", help="Directory to write CSV reports into")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    setup_logging(args.verbose)

    deliveries = load_deliveries(args.input)
    q = QueryHelper(QueryConfig(missing_arrival=args.missing_arrival))
    delivery_type = DeliveryType.parse(args.type)

    print(f"Loaded {len(deliveries)} deliveries from '{args.input}'\n")

    paid = list(q.paid(deliveries))
    open_ = list(q.not_finished(deliveries))
    print(f"Paid: {len(paid)}   Not finished: {len(open_)}")
    print(f"Unique cargo types: {q.count_uniq_cargo_types(deliveries)}")

    counts = q.counts_by_delivery_status(deliveries)
    print("\nDeliveries per status:")
    for status, n in sorted(counts.items(), key=lambda kv: kv[0].ordinal):
        print(f"  {status.value:12s} {n}")

    infos = list(q.delivery_infos_by_client(deliveries, args.client))
    print(f"\nClient {args.client}: {len(infos)} deliveries")
    for info in infos:
        print(f"  {info.id}  {info.start_city} → {info.end_city}  {info.status.value}")

    first_ten = q.paging(
        q.deliveries_by_city_and_type(deliveries, args.city, delivery_type),
        ordering=lambda d: d.id,
        count_on_page=CITY_TYPE_PAGE_SIZE,
    )
    print(f"\nFirst {CITY_TYPE_PAGE_SIZE} {delivery_type.value} deliveries from {args.city}:")
    for d in first_ten:
        print(f"  {d.id}  → {d.end_city}")

    pages = page_count(len(deliveries), args.page_size)
    print(f"\nOrdered by status, loading start (page {args.page}/{pages}):")
    for d in q.paging(deliveries, status_then_loading_start_key, count_on_page=args.page_size, page_number=args.page):
        print(f"  {d.id}  {d.status.value:12s} {d.loading_period.start}")

    gaps = list(q.average_travel_time_per_direction(deliveries))
    print("\nAverage travel time per direction (min):")
    for g in sorted(gaps, key=lambda g: (g.start_city, g.end_city)):
        print(f"  {g.start_city:12s} → {g.end_city:12s} {g.average_gap:8.1f}")

    if args.export:
        paths = export_reports(args.export, short_infos=infos, average_gaps=gaps, status_counts=counts)
        print(f"\n✓ Reports saved to: {', '.join(paths.values())}")


if __name__ == "__main__":
    main()
