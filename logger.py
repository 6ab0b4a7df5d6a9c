import logging


def setup_logging(level="INFO"):
    logger = logging.getLogger()
    if logger.handlers:
        logger.setLevel(level)
        return
    logger.setLevel(level)
    fmt = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    stream = logging.StreamHandler()
    stream.setFormatter(fmt)
    logger.addHandler(stream)
