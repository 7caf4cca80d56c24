"""
Unit test for the logging handlers of the gcpcsaft package.
"""

import gcpcsaft
import logging
import random
import os

logger = logging.getLogger(__name__)


def test_gcpcsaft_log_file(tmp_path):
    """Test enabling of logging"""

    fname = str(tmp_path / "gcpcsaft_{}.log".format(random.randint(1, 10)))
    gcpcsaft.initiate_logger(log_file=fname, verbose=10)
    logger.info("test")

    flag = os.path.isfile(fname)
    gcpcsaft.initiate_logger(log_file=False)

    assert flag


def test_gcpcsaft_log_console(capsys):
    """Test enabling of logging"""

    gcpcsaft.initiate_logger(console=True, verbose=10)
    logger.info("test")

    _, err = capsys.readouterr()

    gcpcsaft.initiate_logger(console=False)

    assert "[INFO]({}): test".format(__name__) in err
