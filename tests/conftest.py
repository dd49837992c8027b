"""
Pytest 配置和共用 fixtures
"""

from pathlib import Path

import pytest

from display_aligner.utils.geometry import Interval


SAMPLE_REPORT = """\
Persistent screen id: 37D8832A-2D66-02CA-B9F7-8F30A301B230
Contextual screen id: 1
Serial screen id: s4251086178
Type: MacBook built in screen
Resolution: 1440x900
Hertz: 60
Color Depth: 8
Scaling: on
Origin: (0,0) - main display
Rotation: 0 - rotate internal screen example (may crash computer, but will be rotated after rebooting): `displayplacer "id:37D8832A-2D66-02CA-B9F7-8F30A301B230 degree:90"`
Enabled: true
Resolutions for rotation 0:
  mode 0: res:1440x900 hz:60 color_depth:4
  mode 1: res:1440x900 hz:60 color_depth:8 scaling:on <-- current mode
  mode 2: res:720x450 hz:60 color_depth:4 scaling:on

Persistent screen id: 1E8F2B3C-9A21-4C3D-8E55-0A1B2C3D4E5F
Contextual screen id: 2
Serial screen id: s1129208630
Type: 27 inch external screen
Resolution: 2560x1440
Hertz: 60
Color Depth: 8
Scaling: off
Origin: (1640,-300)
Rotation: 0
Enabled: true
Resolutions for rotation 0:
  mode 0: res:2560x1440 hz:60 color_depth:8 <-- current mode
  mode 1: res:1920x1080 hz:60 color_depth:8

Execute the command below to set your screens to the current arrangement. If screen ids are switching, please run `displayplacer --help` for info on using contextual or serial ids instead of persistent ids.

displayplacer "id:37D8832A-2D66-02CA-B9F7-8F30A301B230 res:1440x900 hz:60 color_depth:8 scaling:on origin:(0,0) degree:0" "id:1E8F2B3C-9A21-4C3D-8E55-0A1B2C3D4E5F res:2560x1440 hz:60 color_depth:8 scaling:off origin:(1640,-300) degree:0"
"""


@pytest.fixture
def sample_report() -> str:
    """兩個螢幕的 displayplacer list 輸出"""
    return SAMPLE_REPORT


@pytest.fixture
def sample_report_file(tmp_path: Path, sample_report: str) -> Path:
    """寫入暫存檔的報告"""
    path = tmp_path / "displayplacer_list.txt"
    path.write_text(sample_report, encoding="utf-8")
    return path


@pytest.fixture
def base_interval() -> Interval:
    """基準區間 [0, 10]，中點 5"""
    return Interval(0, 10)
