"""owo.parsing – command-line parser."""
