"""Encoding and validation utilities for ecserde."""
