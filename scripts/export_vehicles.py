#!/usr/bin/env python3
"""
Export the showcase vehicle collection as JSON.

The frontend can develop against this file without a running API. The
output uses the same JSON shape as GET /v1/vehicles/{id}.

Usage:
    python scripts/export_vehicles.py                 # writes to stdout
    python scripts/export_vehicles.py vehicles.json   # writes to a file
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from vehicle_showcase.adapters.mock_vehicles import VEHICLES
from vehicle_showcase.entrypoints.http.mappers.vehicle_mapper import VehicleMapper


def export_vehicles(output: Path | None = None) -> int:
    """
    Serialize every vehicle and write the JSON array.

    Args:
        output: Destination file; stdout when None

    Returns:
        Number of vehicles exported
    """
    payload = [
        VehicleMapper.to_vehicle_response(vehicle).model_dump(mode="json")
        for vehicle in VEHICLES
    ]
    text = json.dumps(payload, indent=2)

    if output is None:
        print(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        print(f"✅ Exported {len(payload)} vehicles to {output}", file=sys.stderr)

    return len(payload)


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        export_vehicles(Path(sys.argv[1]) if len(sys.argv) > 1 else None)
    except Exception as e:
        print(f"❌ Error exporting vehicles: {e}", file=sys.stderr)
        sys.exit(1)
