"""Polling triggers for Linear issues."""

__version__ = "0.1.0"
