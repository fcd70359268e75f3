"""Test suite for the Services Catalog API."""
