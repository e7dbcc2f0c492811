import argparse
import json
import sys

from customer_health.services import build_score_envelope, evaluate_customer


def load_record(path):
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Calculate the health score of one customer record."
    )
    parser.add_argument(
        "record",
        help="Path to a JSON file with payment, engagement, contract and support data ('-' reads stdin)",
    )
    args = parser.parse_args(argv)

    try:
        record = load_record(args.record)
    # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
    except (OSError, ValueError) as e:
        parser.exit(1, f"Could not read customer record: {e}\n")

    outcome = evaluate_customer(record)
    print(json.dumps(build_score_envelope(outcome), indent=2))
    return 0 if outcome.ok else 1


if __name__ == "__main__":
    sys.exit(main())
