"""records_api — Lambda handler for a single-table records API.

Provides:
    - GET /records, POST /records, GET /records/{id} routing
    - DynamoDB-backed record store
    - API Gateway response helpers
"""

__version__ = "1.0.0"
