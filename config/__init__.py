"""Configuration module for the ABA bank file generator."""

from .settings import generator_config, parser_config, app_config

__all__ = ["generator_config", "parser_config", "app_config"]
