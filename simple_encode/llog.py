# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import logging
import logging.config
import os

logging_initialized = False

def install_null_handler():
    "Keeps 'No handlers' output away without touching the host's logging."
    logger = logging.getLogger("simple_encode")
    for h in logger.handlers:
        if isinstance(h, logging.NullHandler):
            return
    logger.addHandler(logging.NullHandler())

def init(config_file="logging.ini"):
    "Explicit bootstrap for programs; the library never calls this itself."
    global logging_initialized

    if logging_initialized:
        return

    if os.path.isfile(config_file):
        logging.config.fileConfig(config_file, disable_existing_loggers=False)

    logging_initialized = True

install_null_handler()
