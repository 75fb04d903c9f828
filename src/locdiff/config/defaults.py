"""Starter .locdiff.toml template."""

CONFIG_FILENAME = ".locdiff.toml"

DEFAULT_TOML = """\
# locdiff configuration
version = "1.0"

[compare]
fail_on = "never"         # never | missing | different — exit 1 when tripped
show_identical = true

[input]
max_file_size_kb = 1024

[output]
format = "terminal"       # terminal | json
show_summary = true
indent = 2                # indent for JSON written by `locdiff apply`
max_value_length = 50     # truncate long values in the terminal table
"""
