from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure src/ is importable when running this script without installing the package
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from pydantic import ValidationError  # noqa: E402

from smarthome.io.loader import load_home_input  # noqa: E402
from smarthome.io.logger import ScheduleLogger  # noqa: E402
from smarthome.metrics.summary import summarize_schedule  # noqa: E402
from smarthome.planning.scheduler import SmartHome  # noqa: E402
from smarthome.validation.checks import ScheduleInputError  # noqa: E402

LOG = logging.getLogger("smarthome")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Compute a day-ahead device schedule from a JSON payload.")
    ap.add_argument("input", type=str, help="Path to JSON with devices, rates and maxPower")
    ap.add_argument("--out", type=str, default=None, help="Directory for schedule JSON and hourly CSV")
    ap.add_argument("--prefix", type=str, default="home")
    ap.add_argument("--indent", type=int, default=2)
    ap.add_argument("--log-level", type=str, default="WARNING")

    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        payload = load_home_input(args.input)
    except (FileNotFoundError, json.JSONDecodeError, ValidationError) as e:
        print(f"Cannot read input: {e}", file=sys.stderr)
        return 2

    try:
        home = SmartHome(payload)
    except ScheduleInputError as e:
        print(str(e), file=sys.stderr)
        return 1

    result = home.compute_schedule()
    print(json.dumps(result.to_dict(), indent=args.indent, ensure_ascii=False))

    summary = summarize_schedule(home, result)
    if summary.unfulfilled:
        LOG.info("Devices not fully scheduled: %s", ", ".join(summary.unfulfilled))

    if args.out:
        paths = ScheduleLogger(out_dir=Path(args.out)).flush(home, result, prefix=args.prefix)
        LOG.info("Wrote %s", paths)
    return 0


if __name__ == "__main__":
    sys.exit(main())
