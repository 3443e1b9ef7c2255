# gears utilities package
#
# Provides a single import surface for the gears helpers:
#
#   from gears import (
#       TableFormatter, format_table, terminal_width,
#       temp_path, rm_f, grep, strip_ansi, ok_or_raise,
#   )
#
# Lazy loading: imports are deferred via __getattr__ until a name is first
# used, so `import gears` alone loads none of the submodules.

__version__ = "0.7.0"

# Mapping from public name -> (module_path, attribute_name)
_LAZY_IMPORTS = {
    # Table formatting
    "TableFormatter": (".table_formatter", "TableFormatter"),
    "TableOptions": (".table_formatter", "TableOptions"),
    "format_table": (".table_formatter", "format_table"),
    # Width functions
    "char_count": (".display_width", "char_count"),
    "half_width_length": (".display_width", "half_width_length"),
    "terminal_width": (".display_width", "terminal_width"),
    "styled_width": (".display_width", "styled_width"),
    "ansi_stripped_length": (".display_width", "ansi_stripped_length"),
    "get_width_function": (".display_width", "get_width_function"),
    # Console output
    "print_table": (".console", "print_table"),
    "write_table": (".console", "write_table"),
    # Strings
    "grep": (".string_utils", "grep"),
    "strip_ansi": (".string_utils", "strip_ansi"),
    "counted_noun": (".string_utils", "counted_noun"),
    "prefix_every_line": (".string_utils", "prefix_every_line"),
    "remove_empty_lines": (".string_utils", "remove_empty_lines"),
    # Files
    "temp_path": (".file_utils", "temp_path"),
    "temp_dir": (".file_utils", "temp_dir"),
    "rm_f": (".file_utils", "rm_f"),
    "exists": (".file_utils", "exists"),
    "is_symlink": (".file_utils", "is_symlink"),
    "is_dangling_symlink": (".file_utils", "is_dangling_symlink"),
    # Language helpers
    "apply_if": (".lang_utils", "apply_if"),
    "append_if": (".lang_utils", "append_if"),
    "OperPipeline": (".lang_utils", "OperPipeline"),
    "Ok": (".lang_utils", "Ok"),
    "Err": (".lang_utils", "Err"),
    "ok_or_raise": (".lang_utils", "ok_or_raise"),
    # Configuration
    "GearsConfig": (".config", "GearsConfig"),
    "load_config": (".config", "load_config"),
    # Errors
    "GearsError": (".errors", "GearsError"),
    "InvalidCellType": (".errors", "InvalidCellType"),
    "InvalidWidth": (".errors", "InvalidWidth"),
    "FileOperationError": (".errors", "FileOperationError"),
    "ResultError": (".errors", "ResultError"),
}


def __getattr__(name):
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        import importlib
        module = importlib.import_module(module_path, __name__)
        value = getattr(module, attr_name)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_LAZY_IMPORTS.keys())
