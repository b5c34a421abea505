"""Job application registration form: schema, controller and display."""

__version__ = "0.1.0"
