"""Unit tests for the Crowdin client.

This package contains test modules for all components of the crowdin_client package.
Tests use pytest with asyncio support and replace HTTP sessions and transports with fakes via monkeypatch.
"""
