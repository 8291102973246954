"""YAML Converter - Convert between JSON and a flat YAML subset."""

from .converter import YAMLConverter, json_to_yaml, yaml_to_json

__all__ = ["YAMLConverter", "json_to_yaml", "yaml_to_json"]
