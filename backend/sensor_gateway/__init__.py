"""
Sensor Gateway
==============

HTTP gateway that stores sensor measurements in MongoDB.

HOW IT'S ORGANIZED:
------------------
- config.py  = Settings from the environment
- models/    = Response shapes (what does a measurement look like?)
- services/  = MeasureStore, the only code that talks to MongoDB
- routers/   = API endpoints
- utils/     = Validation, time windows, bearer tokens
- main.py    = Puts it all together
"""

__version__ = "1.0.0"
