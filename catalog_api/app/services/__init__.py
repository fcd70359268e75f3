"""
Service layer abstraction.

Each service encapsulates the business logic for one entity and talks
to the database through the ``Store`` handle passed in by the API
layer, so handlers stay free of SQL.
"""
