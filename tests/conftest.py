import logging

import pytest
from loguru import logger

from emboss.container_models import Canvas, Material, Setting, Vector3

CANVAS_SIZE = 300


class PropagateHandler(logging.Handler):
    """Handler that propagates loguru records to standard logging."""

    def emit(self, record: logging.LogRecord) -> None:
        logging.getLogger(record.name).handle(record)


@pytest.fixture
def caplog(caplog):
    """Fixture to enable caplog to capture loguru logs."""
    handler_id = logger.add(PropagateHandler(), format="{message}")
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(scope="session")
def setting() -> Setting:
    """Light from the top left, slightly in front of the image."""
    return Setting(
        incident=Vector3(0.2, 1.0, -0.2), ambient_brightness=0.8, distance=2000
    )


@pytest.fixture(scope="session")
def white() -> Material:
    return Material(color=(255, 255, 255, 255), shininess=7, reflection_brightness=1.0)


@pytest.fixture(scope="session")
def black() -> Material:
    return Material(color=(0, 0, 0, 255), shininess=7, reflection_brightness=1.0)


@pytest.fixture(scope="session")
def blue() -> Material:
    return Material(color=(179, 220, 214, 255), shininess=4, reflection_brightness=0.2)


@pytest.fixture
def canvas() -> Canvas:
    """Fresh transparent canvas."""
    return Canvas.blank(CANVAS_SIZE, CANVAS_SIZE)
