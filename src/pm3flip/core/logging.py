from __future__ import annotations

import logging

TRACE = 15
logging.addLevelName(TRACE, "TRACE")
