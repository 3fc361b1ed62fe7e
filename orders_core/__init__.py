"""clean-orders core: domain, application, data and infrastructure layers."""

__version__ = "1.0.0"
