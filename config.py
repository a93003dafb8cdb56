import os

# held-karp keeps two 2^(n-1) x n tables (cost and predecessor),
# at 20 locations that is ~10M cells each
MAX_LOCATIONS = int(os.environ.get("TSP_MAX_LOCATIONS", 20))

LOG_LEVEL = os.environ.get("TSP_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "[%(levelname)s] %(message)s"

# flask
DEBUG = os.environ.get("TSP_DEBUG", "0").lower() in ("1", "true", "yes")
HOST = os.environ.get("TSP_HOST", "127.0.0.1")
PORT = int(os.environ.get("TSP_PORT", 5000))

# decimals used when reporting a distance to the user
DISTANCE_PRECISION = 2
