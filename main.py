# main.py
from src.business_objects.common import DeliveryType
from src.business_objects.config import DeliveryGenConfig
from src.business_objects.generators import make_deliveries, save_json_files
from src.queries import MissingArrivalPolicy, QueryConfig, QueryHelper


def main():
    # ------------------------------------------------------------
    # Define configuration
    # ------------------------------------------------------------
    cfg = DeliveryGenConfig(
        seed=123,
        num_deliveries=60,
        num_clients=6,
        cities=["Haifa", "Tel Aviv", "Jerusalem", "Eilat"],
        paid_fraction=0.55,
        missing_arrival_fraction=0.2,
    )

    # ------------------------------------------------------------
    # Generate synthetic deliveries
    # ------------------------------------------------------------
    deliveries = make_deliveries(cfg)
    print(f"Generated {len(deliveries)} deliveries.\n")

    q = QueryHelper(QueryConfig(missing_arrival=MissingArrivalPolicy.SKIP))

    print(f"Paid: {sum(1 for _ in q.paid(deliveries))}")
    print(f"Not finished: {sum(1 for _ in q.not_finished(deliveries))}")
    print(f"Unique cargo types: {q.count_uniq_cargo_types(deliveries)}")
    per_status = {s.value: n for s, n in q.counts_by_delivery_status(deliveries).items()}
    print(f"Per status: {per_status}")

    print("\nClient C001:")
    for info in q.delivery_infos_by_client(deliveries, "C001"):
        print(f"  {info.id} {info.start_city} → {info.end_city} ({info.status.value})")

    print("\nFirst ten Express deliveries from Haifa:")
    for d in q.paging(q.deliveries_by_city_and_type(deliveries, "Haifa", DeliveryType.EXPRESS),
                      ordering=lambda d: d.id, count_on_page=10):
        print(f"  {d.id}")

    print("\nAverage travel time per direction:")
    for g in q.average_travel_time_per_direction(deliveries):
        print(f"  {g.start_city} → {g.end_city}: {g.average_gap:.1f} min")

    # ------------------------------------------------------------
    # Export to JSON
    # ------------------------------------------------------------
    save_json_files(deliveries, output_dir="generated_example_1")


if __name__ == "__main__":
    main()
