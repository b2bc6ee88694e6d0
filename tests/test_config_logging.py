import logging

import numpy as np
import pytest

from corrstat import InvalidArgumentError, configure, get_config, reset_config
from corrstat.descriptive import median
from corrstat.correlation import row_wise_pearson
from corrstat.utils import get_logger, set_console_level, setup_file_logging


class TestConfig:
    def test_defaults(self):
        cfg = get_config()
        assert cfg.seed == 0
        assert cfg.bicor_tuning_constant == 9.0
        assert cfg.console_level == logging.WARNING

    def test_configure_and_reset(self):
        configure(seed=7)
        assert get_config().seed == 7
        reset_config()
        assert get_config().seed == 0

    def test_unknown_field(self):
        with pytest.raises(InvalidArgumentError, match="Unknown"):
            configure(colour="blue")

    def test_non_positive_tuning_constant(self):
        with pytest.raises(InvalidArgumentError):
            configure(bicor_tuning_constant=0.0)

    def test_seedless_median_still_exact(self, rng):
        configure(seed=None)
        x = rng.normal(size=101)
        assert median(x) == np.median(x)


class TestLogging:
    def test_loggers_do_not_propagate(self):
        logger = get_logger("corrstat.test")
        assert logger.propagate is False
        assert logger.level == logging.DEBUG

    def test_single_console_handler(self):
        logger = get_logger("corrstat.test.handlers")
        get_logger("corrstat.test.handlers")
        consoles = [
            h for h in logger.handlers
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        ]
        assert len(consoles) == 1

    def test_configure_updates_existing_console_handlers(self):
        logger = get_logger("corrstat.correlation.matrix")

        def console_levels():
            return [
                h.level for h in logger.handlers
                if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
            ]

        configure(console_level=logging.DEBUG)
        assert console_levels() == [logging.DEBUG]
        reset_config()
        assert console_levels() == [logging.WARNING]

    def test_file_logging_captures_debug(self, tmp_path):
        log_file = setup_file_logging(tmp_path)
        assert log_file == tmp_path / "corrstat.log"
        row_wise_pearson(np.arange(12.0).reshape(3, 4))
        text = log_file.read_text(encoding="utf-8")
        assert "File logging initialized" in text
        assert "corrstat.correlation.matrix" in text
        assert "DEBUG" in text

    def test_set_console_level(self):
        logger = get_logger("corrstat.test.console")
        set_console_level(logging.ERROR)
        try:
            levels = [
                h.level for h in logger.handlers
                if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
            ]
            assert levels == [logging.ERROR]
        finally:
            set_console_level(logging.WARNING)
