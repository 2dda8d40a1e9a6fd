"""
Component tests for the Storefront API

Component tests drive the HTTP endpoints with real routers, services and
repositories against a throwaway SQLite database (no mocking).
"""
