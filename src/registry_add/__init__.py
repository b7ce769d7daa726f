"""Admit new modules and providers into a registry catalog."""
