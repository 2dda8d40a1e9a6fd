"""
Service-level tests for cart reconciliation (store, resolver, engine,
projection), called directly with a Session.
"""
