"""
config.py
Global configuration settings for the OpenTDB client.
"""

# Endpoints
BASE_URL = "https://opentdb.com/api.php"
TOKEN_URL = "https://opentdb.com/api_token.php"
CATEGORY_COUNT_URL = "https://opentdb.com/api_count.php"
GLOBAL_COUNT_URL = "https://opentdb.com/api_count_global.php"
CATEGORY_LIST_URL = "https://opentdb.com/api_category.php"

# Request defaults
DEFAULT_AMOUNT = 10  # Amount pre-set on requests created by a client
DEFAULT_TIMEOUT = 10  # Seconds
USER_AGENT = "Python-OpenTDB-client"
