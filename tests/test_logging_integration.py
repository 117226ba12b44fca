import sys
import os
import numpy as np

# Ensure local `src/` package is importable when running tests without installation
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_PATH = os.path.join(PROJECT_ROOT, "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from hoeffding_split import HoeffdingNumericSplit


def test_binning_is_logged(capsys):
    split = HoeffdingNumericSplit(num_classes=2, bins=2, observations_before_binning=3, verbose=1)
    split.train_batch([1.0, 3.0, 5.0], [0, 1, 0])

    captured = capsys.readouterr()
    assert "[HoeffdingSplit]" in captured.out
    assert "Binning after 3 observations" in captured.out
    assert "min=1" in captured.out
    assert "max=5" in captured.out


def test_silent_by_default(capsys):
    split = HoeffdingNumericSplit(num_classes=2, bins=2, observations_before_binning=3)
    split.train_batch(np.arange(10.0), np.arange(10) % 2)

    captured = capsys.readouterr()
    assert captured.out == ""


def test_debug_messages_need_verbose_two(capsys):
    split = HoeffdingNumericSplit(num_classes=2, bins=2, observations_before_binning=2, verbose=1)
    split.train_batch([4.0, 4.0], [0, 1])
    assert "constant" not in capsys.readouterr().out

    split = HoeffdingNumericSplit(num_classes=2, bins=2, observations_before_binning=2, verbose=2)
    split.train_batch([4.0, 4.0], [0, 1])
    HoeffdingNumericSplit.from_dict(split.to_dict(), verbose=2)

    out = capsys.readouterr().out
    assert "constant" in out
    assert "Restored binned split" in out
