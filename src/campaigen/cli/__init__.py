"""
Command Line Interface Package

Unified CLI for campaign data operations.

Command Structure:
- campaigen: Main entry point with utility commands (version, config, status)
- campaigen spend: add, list, show and delete marketing spend records
- campaigen influencer: add, list, show and delete influencer profiles

Each invocation wires its own session, stores and services; see context.py.
"""
