"""Application layer - Use cases and orchestration.

Structure:
- services/: Authorization decider and financial aggregator
- queries/: Query dataclasses and handlers (read operations)

The application layer orchestrates domain logic; decision rules live in the
domain codecs and are only combined here.
"""
