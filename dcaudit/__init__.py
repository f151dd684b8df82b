"""dcaudit: identifiers for datacenter audits."""

__version__ = "0.1.0"
