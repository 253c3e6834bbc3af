# file: tests/unit_tests/conftest.py
import logging


def pytest_configure(config):
    # Create a custom logger
    logger = logging.getLogger('strscan')
    logger.setLevel(logging.DEBUG)

    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG)
    ch.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(ch)
