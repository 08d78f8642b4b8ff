import json
import tempfile
from pathlib import Path

import pandas as pd
import pytest

from smarthome.io.logger import ScheduleLogger
from smarthome.metrics.energy import ConsumedEnergyTracker
from smarthome.metrics.summary import (
    fulfilment_frame,
    hourly_frame,
    hourly_load_profile,
    summarize_schedule,
    unfulfilled_devices,
)
from smarthome.planning.scheduler import SmartHome


def crowded_home():
    return SmartHome({
        "devices": [
            {"id": "a", "power": 100, "duration": 2},
            {"id": "b", "power": 60, "duration": 1},
        ],
        "rates": [{"value": 1, "from": 0, "to": 2}],
        "maxPower": 100,
    })


def test_hourly_load_profile():
    home = crowded_home()
    result = home.compute_schedule()
    profile = hourly_load_profile(home, result)
    assert profile.shape == (24,)
    assert profile[0] == 100 and profile[1] == 100
    assert profile[2:].sum() == 0


def test_fulfilment_and_unfulfilled():
    home = crowded_home()
    result = home.compute_schedule()
    df = fulfilment_frame(home, result)
    assert list(df["device_id"]) == ["a", "b"]
    assert list(df["missing_h"]) == [0, 1]
    assert unfulfilled_devices(home, result) == ["b"]


def test_summary_values():
    home = crowded_home()
    result = home.compute_schedule()
    s = summarize_schedule(home, result)
    assert s.peak_load_w == 100
    assert abs(s.utilisation - 200 / (100 * 24)) < 1e-9
    assert abs(s.total_cost - 0.2) < 1e-9
    assert s.unfulfilled == ["b"]


def test_hourly_frame_headroom():
    home = crowded_home()
    df = hourly_frame(home, home.compute_schedule())
    assert len(df) == 24
    assert df.loc[0, "device_ids"] == "a"
    assert df.loc[0, "headroom_w"] == 0
    assert df.loc[5, "headroom_w"] == 100


def test_schedule_logger_writes_files():
    home = crowded_home()
    result = home.compute_schedule()
    with tempfile.TemporaryDirectory() as tmp:
        paths = ScheduleLogger(out_dir=Path(tmp) / "out").flush(home, result, prefix="home")
        schedule = json.loads(Path(paths["schedule_json"]).read_text(encoding="utf-8"))
        assert schedule["schedule"]["0"] == ["a"]
        df = pd.read_csv(paths["hourly_csv"])
        assert len(df) == 24
        assert df["load_w"].max() == 100


def test_energy_tracker_finalizes_once():
    t = ConsumedEnergyTracker()
    t.reset_device("a")
    t.add("a", 1500.0)
    t.finalize()
    t.finalize()
    assert t.total == 1.5
    assert t.per_device == {"a": 1.5}


def test_energy_tracker_rejects_changes_after_finalize():
    t = ConsumedEnergyTracker()
    t.add("a", 1000.0)
    energy = t.finalize()
    assert energy.total == 1.0
    with pytest.raises(RuntimeError):
        t.add("a", 1.0)
    with pytest.raises(RuntimeError):
        t.reset_device("a")
    assert t.per_device == {"a": 1.0}
