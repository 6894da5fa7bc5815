"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validator - used by framework via @field_validator decorator
_.normalize_report_format  # noqa: F821  # unused method (commonstrip/core/config.py:37)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (commonstrip/core/config.py:47)

# Pydantic model_config class variable - read by framework at class definition time
model_config  # noqa: F821  # unused variable (commonstrip/core/config.py:23)

# Entry point exposed through [project.scripts] and package exports
main  # unused function (commonstrip/__main__.py)
remove_common_substrings  # unused function (commonstrip/removal/driver.py)
