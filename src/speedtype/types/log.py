import logging

TRACE = 5

logging.addLevelName(TRACE, "TRACE")
