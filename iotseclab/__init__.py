"""Publish XOR-obfuscated sensor readings to an MQTT broker."""

__version__ = "0.1.0"
__all__ = ["__version__"]