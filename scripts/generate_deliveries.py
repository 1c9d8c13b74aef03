"""
Generate synthetic delivery sets.

Usage:
    python -m scripts.generate_deliveries --output data/sample --seed 123
    python -m scripts.generate_deliveries --scenario small
    python -m scripts.generate_deliveries --scenario large --deliveries 500
"""

import argparse
import dataclasses

from scripts.utils import setup_logging
from src.business_objects.config import DeliveryGenConfig
from src.business_objects.generators import make_deliveries, save_json_files

# Predefined scenarios
SCENARIOS = {
    "small": DeliveryGenConfig(seed=42, num_deliveries=20, num_clients=4),
    "medium": DeliveryGenConfig(seed=123, num_deliveries=250, num_clients=20),
    "large": DeliveryGenConfig(
        seed=999,
        num_deliveries=2000,
        num_clients=120,
        cities=["Haifa", "Tel Aviv", "Jerusalem", "Beer Sheva", "Eilat", "Ashdod", "Nazareth", "Tiberias"],
        missing_arrival_fraction=0.10,
    ),
}


def main():
    parser = argparse.ArgumentParser(description="Generate a synthetic delivery set")
    parser.add_argument("--output", default="data/sample", help="Output directory name")
    parser.add_argument("--scenario", choices=sorted(SCENARIOS), default="small", help="Use predefined scenario")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--deliveries", type=int, help="Override number of deliveries")
    parser.add_argument("--clients", type=int, help="Override number of clients")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    setup_logging(args.verbose)

    print(f"Using '{args.scenario}' scenario")
    cfg = dataclasses.replace(SCENARIOS[args.scenario])

    # Apply overrides
    if args.seed is not None:
        cfg.seed = args.seed
    if args.deliveries is not None:
        cfg.num_deliveries = args.deliveries
    if args.clients is not None:
        cfg.num_clients = args.clients

    print(f"\nGenerating with seed={cfg.seed}...")
    deliveries = make_deliveries(cfg)
    print(f"✓ Generated {len(deliveries)} deliveries\n")

    print("Sample Deliveries:")
    for d in deliveries[:3]:
        print(f"  {d.id}: {d.start_city} → {d.end_city}, {d.status.value}, paid={d.is_paid}")

    path = save_json_files(deliveries, output_dir=args.output)
    print(f"\n✓ Saved to '{path}'")


if __name__ == "__main__":
    main()
