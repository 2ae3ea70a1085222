"""Typed client library for the Redfish systems-management API."""

__version__ = '0.1.0'
