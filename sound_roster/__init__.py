"""Sound-team duty roster for a house of worship.

Modules:
- config: load and validate configuration (YAML or JSON)
- domain: roster snapshot types, SQLAlchemy models and repositories
- engine: service-day calculation, leader/participant rotation, orchestrator
- services: availability checks and the minimum headcount gate
- validator: post-generation checks
- reporting: list, calendar and summary views of a schedule
- io: CSV import
- cli: command-line interface entrypoints
"""

__all__ = [
    "config",
    "domain",
    "engine",
    "services",
    "validator",
    "reporting",
    "io",
    "cli",
]
