"""
Validation of YamlEdit configuration files.

`validate_config` checks the sections YamlEdit knows about and returns the
problems it found, grouped by section. Unknown sections are reported too, as
they are most likely typos.
"""

from typing import TypedDict, Literal, Optional, Dict, Any, List

from YamlEdit.config.defaults import DEFAULT_CONFIG

# Define valid options as literals for type checking
LoggingLevel = Literal["debug", "info", "warning", "error", "critical"]
LoggingFormat = Literal["json", "text"]

class LoggingConfig(TypedDict):
    """TypedDict for logging configuration validation"""
    level: LoggingLevel
    format: LoggingFormat
    file: Optional[str]

class OutputConfig(TypedDict):
    """TypedDict for YAML output configuration validation"""
    explicit_start: bool
    explicit_end: bool
    indent: int
    width: int
    allow_unicode: bool
    default_flow_style: bool

class ConfigSchema(TypedDict):
    """TypedDict for the complete configuration"""
    logging: LoggingConfig
    output: OutputConfig

def is_valid_logging_level(level: str) -> bool:
    """Validate the logging level against allowed values"""
    return level in ("debug", "info", "warning", "error", "critical")

def is_valid_logging_format(fmt: str) -> bool:
    """Validate the logging format against allowed values"""
    return fmt in ("json", "text")

def validate_logging_config(logging_config: Dict[str, Any]) -> List[str]:
    """
    Validate the logging section.

    Args:
        logging_config: The logging section of a configuration file

    Returns:
        List of error messages (empty when valid)
    """
    errors = []

    if "level" in logging_config and not is_valid_logging_level(logging_config["level"]):
        errors.append(f"Invalid logging level: {logging_config['level']}. "
                      "Must be one of: debug, info, warning, error, critical")

    if "format" in logging_config and not is_valid_logging_format(logging_config["format"]):
        errors.append(f"Invalid logging format: {logging_config['format']}. Must be one of: json, text")

    log_file = logging_config.get("file")
    if log_file is not None and not isinstance(log_file, str):
        errors.append("Logging file must be a path or null")

    return errors

def validate_output_config(output_config: Dict[str, Any]) -> List[str]:
    """
    Validate the output section.

    Args:
        output_config: The output section of a configuration file

    Returns:
        List of error messages (empty when valid)
    """
    errors = []

    for flag in ("explicit_start", "explicit_end", "allow_unicode", "default_flow_style"):
        if flag in output_config and not isinstance(output_config[flag], bool):
            errors.append(f"Output option '{flag}' must be true or false")

    indent = output_config.get("indent")
    # The YAML emitter only honours indents between 2 and 9
    if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int) or not 2 <= indent <= 9):
        errors.append(f"Invalid output indent: {indent}. Must be an integer between 2 and 9")

    width = output_config.get("width")
    if width is not None and (isinstance(width, bool) or not isinstance(width, int) or width < 20):
        errors.append(f"Invalid output width: {width}. Must be an integer of at least 20")

    for key in output_config:
        if key not in DEFAULT_CONFIG["output"]:
            errors.append(f"Unknown output option: {key}")

    return errors

def validate_config(config: Dict[str, Any]) -> Dict[str, List[str]]:
    """
    Validate a configuration structure.

    Sections may be omitted; missing values fall back to the defaults.

    Args:
        config: The configuration dictionary to validate

    Returns:
        Dictionary mapping sections to lists of error messages
    """
    errors: Dict[str, List[str]] = {}

    if not isinstance(config, dict):
        return {"config": ["Configuration must be a mapping"]}

    validators = {
        "logging": validate_logging_config,
        "output": validate_output_config,
    }

    for section, value in config.items():
        if section not in validators:
            errors[section] = [f"Unknown configuration section: {section}"]
        elif not isinstance(value, dict):
            errors[section] = [f"Section '{section}' must be a mapping"]
        else:
            section_errors = validators[section](value)
            if section_errors:
                errors[section] = section_errors

    return errors
