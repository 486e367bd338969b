# scripts/smoke.py
"""
Smoke Test Script for citeguard validation.

Runs the canonical sample articles (one valid, four broken in different
ways) through ``validate_create`` and prints each verdict, followed by the
reference usage report for the valid sample.

Usage
-----
    $ python scripts/smoke.py
    $ python scripts/smoke.py --file samples/article.json
"""

import argparse
import json
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from citeguard import report_reference_usage, validate_create

env_path = Path(".env")
if env_path.exists():
    load_dotenv(env_path)

# --------------------------------------------------------------------------- #
# Sample Data
# --------------------------------------------------------------------------- #
BASE: dict[str, Any] = {
    "author": "John Doe",
    "title": "Climate change impact",
    "coverImage": "https://example.com/cover.jpg",
    "slug": "climate-change-impact",
}

SAMPLES: dict[str, dict[str, Any]] = {
    "valid article": {
        **BASE,
        "publishedAt": "2024-05-01T08:00:00Z",
        "blocks": [
            {
                "type": "text",
                "data": {"content": "Recent research[1] shows warming continues. Scientists[2] agree."},
                "position": 0,
            },
            {
                "type": "image",
                "data": {
                    "url": "https://example.com/climate.jpg",
                    "alt": "Temperature chart",
                    "caption": "Global temperature trend 2023[3]",
                },
                "position": 1,
            },
            {
                "type": "quote",
                "data": {
                    "content": "We must act now",
                    "author": "Jane Smith",
                    "source": "Environment summit 2024[1]",
                },
                "position": 2,
            },
        ],
        "annotations": [
            {"id": 1, "content": "IPCC AR6, 2021", "url": "https://www.ipcc.ch/report/ar6/"},
            {"id": 2, "content": "Nature Climate Change, Vol 12, 2022"},
            {"id": 3, "content": "NASA Climate Data, 2023", "url": ""},
        ],
    },
    "missing annotation": {
        **BASE,
        "blocks": [{"type": "text", "data": {"content": "Cites[1] and[2]."}, "position": 0}],
        "annotations": [{"id": 1, "content": "Only note"}],
    },
    "orphan annotation": {
        **BASE,
        "blocks": [{"type": "text", "data": {"content": "Cites only[1]."}, "position": 0}],
        "annotations": [{"id": 1, "content": "Used"}, {"id": 2, "content": "Never cited"}],
    },
    "invalid block type": {
        **BASE,
        "blocks": [{"type": "video", "data": {"content": "A clip"}, "position": 0}],
        "annotations": [],
    },
    "invalid image url": {
        **BASE,
        "blocks": [{"type": "image", "data": {"url": "not-a-valid-url"}, "position": 0}],
        "annotations": [],
    },
}


def main() -> None:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run citeguard smoke test")
    parser.add_argument("--file", "-f", type=str, help="Path to an article JSON document")
    args = parser.parse_args()

    samples = SAMPLES
    if args.file:
        input_path = Path(args.file)
        if not input_path.exists():
            print(f"❌ File not found: {input_path}")
            return
        with open(input_path, encoding="utf-8") as f:
            samples = {input_path.name: json.load(f)}

    for name, candidate in samples.items():
        print("\n" + "=" * 60)
        print(f"📝 {name}")
        verdict = validate_create(candidate)
        print("✅ passed" if verdict.success else "❌ failed")
        for message in verdict.errors:
            print(f"   - {message}")

    first = next(iter(samples.values()))
    print("\n📊 Reference usage:")
    for record in report_reference_usage(first.get("blocks", [])):
        print(f"  [{record.marker_id}] block {record.block_index} ({record.block_type}): {record.context}")


if __name__ == "__main__":
    main()
