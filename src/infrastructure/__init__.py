"""Infrastructure layer - Adapters.

This layer contains implementations of domain protocols (ports). The core
itself performs no I/O, so the only adapter shipped here is the structured
console logger.

Structure:
- logging/: LoggerProtocol adapters (structlog)

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
