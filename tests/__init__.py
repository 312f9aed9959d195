# Blog API Test Suite
"""
Test suite for the Blog API.

Key principle: Test through API, not internals. Repository and service
tests cover the layers below the routes.
"""
