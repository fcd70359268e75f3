"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one area of the
API (auth, services, requests, admin).  The routers are aggregated in
``api/router.py``.
"""
