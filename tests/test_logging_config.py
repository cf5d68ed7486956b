"""Package logger configuration."""
import logging

import pytest

from densematrix import DimensionMismatchError, Matrix, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("densematrix")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield logger
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]


def test_setup_logging_does_not_duplicate_handlers(package_logger):
    setup_logging(logging.DEBUG)
    setup_logging(logging.DEBUG)
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG


def test_setup_logging_writes_file(package_logger, tmp_path):
    log_file = tmp_path / "matrix.log"
    setup_logging(logging.INFO, log_file=str(log_file))
    assert len(package_logger.handlers) == 2
    for handler in package_logger.handlers:
        handler.flush()
    assert "Logging initialized." in log_file.read_text(encoding="utf-8")
    for handler in package_logger.handlers:
        handler.close()


def test_dimension_mismatch_is_logged(caplog):
    with caplog.at_level(logging.ERROR, logger="densematrix"):
        with pytest.raises(DimensionMismatchError):
            Matrix(1, 2) + Matrix(2, 1)
    assert any("1x2" in record.getMessage() for record in caplog.records)


def test_operations_log_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="densematrix"):
        Matrix(2, 2) * Matrix(2, 2)
    assert any("Multiplied 2x2 by 2x2" in record.getMessage() for record in caplog.records)
