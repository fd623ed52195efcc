"""
Logger naming.
"""

import logging

from ritual.logging_config import get_logger, setup_logging


def test_get_logger_drops_package_prefix():
    assert get_logger("ritual.engine.reducer").name == "engine.reducer"
    assert get_logger("other.module").name == "other.module"


def test_setup_logging_quiets_uvicorn_access():
    setup_logging("DEBUG", "detailed")
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
