#!/usr/bin/env python3
import json
import argparse
from typing import Any, Dict, List, Optional

import requests

API_URL = "http://127.0.0.1:8000"

# mode -> (endpoint, column key for the computed value, column label)
MODES = {
    "time": ("/calculate-time", "time", "Time (h)"),
    "distance": ("/calculate-distance", "distance", "Distance (km)"),
}

def build_payload(args) -> Dict[str, Any]:
    if args.mode == "time":
        return {"distance": args.distance, "transport": args.vehicle}
    return {"hours": args.hours, "minutes": args.minutes, "vehicle": args.vehicle}

def format_table(data: Dict[str, Any], mode: str) -> str:
    """
    Render the comparison set as a plain-text table.
    The selected vehicle's row is marked with '*'.
    """
    _, key, label = MODES[mode]
    header = ["", "Vehicle", label, "Fuel (L)", "Max range (km)", "Status"]
    chosen = (data.get("selected") or {}).get("vehicle")
    rows: List[List[str]] = [header]
    for r in data.get("comparison", []):
        rows.append([
            "*" if r.get("vehicle") == chosen else "",
            str(r.get("vehicle", "")),
            str(r.get(key, "")),
            str(r.get("fuelUsed", "")),
            str(r.get("maxRange", "")),
            str(r.get("status", "")),
        ])
    widths = [max(len(row[i]) for row in rows) for i in range(len(header))]
    return "\n".join(
        "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip()
        for row in rows
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Call the trip calculator API and print a comparison table.")
    parser.add_argument("--api", default=API_URL, help="Base URL of a running server")
    parser.add_argument("--json", action="store_true", help="Print the raw JSON response")
    sub = parser.add_subparsers(dest="mode", required=True)

    t = sub.add_parser("time", help="Travel time for a distance")
    t.add_argument("--distance", type=float, required=True, help="km")
    t.add_argument("--vehicle", required=True, help='e.g. "Tata Tiago"')

    d = sub.add_parser("distance", help="Distance covered in a duration")
    d.add_argument("--hours", type=float, required=True)
    d.add_argument("--minutes", type=float, default=0.0)
    d.add_argument("--vehicle", required=True, help='e.g. "Mahindra Thar"')
    return parser

def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    endpoint, _, _ = MODES[args.mode]

    r = requests.post(args.api.rstrip("/") + endpoint, json=build_payload(args), timeout=30)
    data = r.json()
    if r.status_code >= 400:
        raise SystemExit(f"API error {r.status_code}: {data.get('error', data)}")

    if args.json:
        print(json.dumps(data, indent=2))
        return
    print(format_table(data, args.mode))

if __name__ == "__main__":
    main()
