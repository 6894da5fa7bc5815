"""Report generation for commonstrip."""

from .writer import event_to_yaml_dict, result_to_yaml_dict, write_report

__all__ = ["event_to_yaml_dict", "result_to_yaml_dict", "write_report"]
