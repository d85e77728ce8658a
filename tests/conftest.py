import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import postfit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Headless Qt for the pointer-bridge tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# Common test fixtures
@pytest.fixture
def sample_variation():
    """A readable, well-proportioned post variation."""
    from postfit.design import PostVariation

    return PostVariation(
        headline="Launch day is here",
        body="Everything you need to ship faster.",
        text_color="#FFFFFF",
        background_color="#000000",
        layout="centered",
        headline_font_size=1.5,
        body_font_size=1.0,
    )


@pytest.fixture
def card_rect():
    """A 200x100 px card whose top-left sits at (100, 50)."""
    from postfit.gestures import ClientRect

    return ClientRect(left=100, top=50, width=200, height=100)
