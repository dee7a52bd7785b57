import pytest

from realtime_detector.__main__ import build_parser
from realtime_detector.display import FrameDisplay
from realtime_detector.pipeline import LoopResult
from realtime_detector.utils import format_caption


@pytest.mark.parametrize("obj", [build_parser, format_caption, FrameDisplay.is_exit_key, LoopResult])
def test_public_api_is_documented(obj) -> None:
    assert obj.__doc__ and obj.__doc__.strip()
