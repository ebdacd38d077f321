"""Shared utilities for tolgee-puller."""
