import sys

from loguru import logger

from shelfgraph.api import create_app
from shelfgraph.config import settings
from shelfgraph.engine import AnalysisEngine

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

logger.info("Initializing shelfgraph relationship engine")
engine = AnalysisEngine()
app = create_app(engine=engine)
